"""
Space Game Scene

The controller owns the world and runs an ordered pipeline of systems
once per tick. Each system reads the tick context, mutates the world
and issues draw calls; none of them keeps state of its own.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from mini_arcade_core.engine.commands import CommandQueue
from mini_arcade_core.runtime.input_frame import InputFrame
from mini_arcade_core.scenes.sim_scene import BaseTickContext, BaseWorld
from mini_arcade_core.scenes.systems import SystemPipeline
from mini_arcade_core.spaces.geometry.bounds import Size2D
from mini_arcade_core.spaces.math.vec2 import Vec2

from space_game.backend import DrawSurface
from space_game.config import GameSettings
from space_game.constants import BLACK, GREY, WHITE
from space_game.entities import (
    Actor,
    ActorKind,
    Enemy,
    PatrolPath,
    Player,
    Projectile,
    ScoreHint,
    StarfieldLayer,
)
from space_game.input import InputEvent, Intent, IntentBuffer
from space_game.utils import logger


class GameMode(str, Enum):
    ATTRACT = "attract"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    mode: GameMode = GameMode.ATTRACT
    score: int = 0
    time_ms: float = 0.0


@dataclass
class GameWorld(BaseWorld):  # pylint: disable=too-many-instance-attributes
    """
    Space Game World
    """

    play_field: Size2D
    player: Player
    enemy: Enemy
    patrol: PatrolPath
    player_start: tuple[float, float]
    enemy_start: tuple[float, float]
    layers: list[StarfieldLayer] = field(default_factory=list)
    state: GameState = field(default_factory=GameState)
    score_hints: list[ScoreHint] = field(default_factory=list)

    def start_game(self) -> None:
        self.state.score = 0
        self.player.reset(*self.player_start)
        self.enemy.reset(*self.enemy_start)
        self.score_hints.clear()
        self.state.mode = GameMode.PLAYING
        logger.info("Game started")

    def enter_attract(self) -> None:
        self.player.reset(*self.player_start)
        self.state.mode = GameMode.ATTRACT
        logger.info("Entering attract mode")

    def game_over(self) -> None:
        self.state.mode = GameMode.GAME_OVER
        logger.info(f"Game over, score {self.state.score}")


def build_world(settings: GameSettings, rng: random.Random) -> GameWorld:
    """
    Create the world in attract mode with everything at its start
    position.
    """
    width, height = settings.window.width, settings.window.height
    play_field = Size2D(width, height)

    player_start = (width / 2, height * settings.player.start_y_ratio)
    enemy_start = (width / 2, height * settings.enemy.start_y_ratio)

    player = Player(
        actor=Actor(
            kind=ActorKind.PLAYER,
            position=Vec2(*player_start),
            play_field=play_field,
            projectile_spec=settings.player.projectile_spec(),
            max_projectiles=settings.player.max_projectiles,
        ),
        speed=settings.player.speed,
    )
    enemy = Enemy(
        actor=Actor(
            kind=ActorKind.ENEMY,
            position=Vec2(*enemy_start),
            play_field=play_field,
            projectile_spec=settings.enemy.projectile_spec(),
            max_projectiles=settings.enemy.max_projectiles,
        )
    )
    patrol = PatrolPath(
        center_x=width / 2,
        base_y=height * settings.enemy.patrol_base_y_ratio,
        range_x=width / 2,
        range_y=settings.enemy.patrol_range_y,
    )
    layers = [
        StarfieldLayer.generate(
            width,
            height,
            rng,
            stars=layer.stars,
            speed=layer.speed,
            max_size=layer.max_size,
        )
        for layer in settings.starfield
    ]
    return GameWorld(
        entities=[],
        play_field=play_field,
        player=player,
        enemy=enemy,
        patrol=patrol,
        player_start=player_start,
        enemy_start=enemy_start,
        layers=layers,
    )


@dataclass
class TickContext(BaseTickContext[GameWorld, Intent]):
    """
    Everything a system needs for one tick.
    """

    surface: DrawSurface | None = None
    sprites: Mapping[str, Any] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)
    settings: GameSettings = field(default_factory=GameSettings)


@dataclass
class ModeSystem:
    """
    Apply buffered input to the mode state machine.

    Input that changes the mode is consumed so it does not also fire a
    shot on the same tick.
    """

    name: str = "space_game_mode"
    order: int = 5

    def step(self, ctx: TickContext):
        w = ctx.world
        it = ctx.intent

        if w.state.mode is GameMode.GAME_OVER:
            if it.fire_requests:
                w.enter_attract()
                ctx.intent = Intent(direction=it.direction)
        elif w.state.mode is GameMode.ATTRACT:
            if it.any_release:
                w.start_game()
                ctx.intent = Intent(direction=it.direction)


@dataclass
class BackgroundSystem:
    name: str = "space_game_background"
    order: int = 10

    def step(self, ctx: TickContext):
        w = ctx.world
        ctx.surface.fill_rect(BLACK, (0, 0, w.play_field.width, w.play_field.height))
        for layer in w.layers:
            layer.scroll()
            layer.draw(ctx.surface)


@dataclass
class OverlaySystem:
    """
    Title or game over text, then the score.
    """

    name: str = "space_game_overlay"
    order: int = 20

    def step(self, ctx: TickContext):
        w = ctx.world
        surface = ctx.surface
        cx = w.play_field.width / 2
        title_y = w.play_field.height * 0.4
        prompt_y = w.play_field.height * 0.7

        if w.state.mode is GameMode.ATTRACT:
            surface.draw_text(
                "Space Game", (cx, title_y), size=180, color=GREY, align="center", bold=True
            )
            surface.draw_text(
                "101",
                (cx, title_y + 140),
                size=200,
                color=WHITE,
                align="center",
                bold=True,
                outline=(BLACK, 10),
            )
            # blinks on every other second
            if int(w.state.time_ms / 1000) % 2:
                surface.draw_text(
                    "PRESS ANY KEY TO START", (cx, prompt_y), size=18, color=WHITE, align="center"
                )
        elif w.state.mode is GameMode.GAME_OVER:
            surface.draw_text(
                "GAME OVER", (cx, title_y), size=180, color=GREY, align="center", bold=True
            )
            surface.draw_text(
                "PRESS SPACE TO RESTART", (cx, prompt_y), size=18, color=WHITE, align="center"
            )

        surface.draw_text(
            str(w.state.score),
            (w.play_field.width * 0.95, 50),
            size=24,
            color=WHITE,
            align="right",
        )


@dataclass
class PlayerSystem:
    """
    Steer, animate and draw the player, then move its shots against
    the enemy.
    """

    name: str = "space_game_player"
    order: int = 30

    def step(self, ctx: TickContext):
        w = ctx.world
        player = w.player

        if w.state.mode is GameMode.ATTRACT:
            self._emulate_controls(ctx)
        elif w.state.mode is GameMode.PLAYING:
            player.direction = ctx.intent.direction
            for _ in range(ctx.intent.fire_requests):
                player.shoot()

        player.tick()
        player.draw(ctx.surface, ctx.sprites)

        # a dead ship's shots stay frozen until the next reset
        if player.is_dead:
            return

        if ctx.settings.show_hitbox:
            player.actor.draw_hitbox(ctx.surface)

        target = None if w.state.mode is GameMode.ATTRACT else w.enemy.hitbox
        player.actor.update_projectiles(
            target, on_hit=lambda projectile: self._credit_hit(ctx, projectile)
        )
        player.actor.draw_projectiles(ctx.surface)

    def _emulate_controls(self, ctx: TickContext) -> None:
        odds = ctx.settings.attract
        if ctx.rng.random() < odds.turn_chance:
            ctx.world.player.direction = ctx.rng.randint(-1, 1)
        if ctx.rng.random() < odds.fire_chance:
            ctx.world.player.shoot()

    def _credit_hit(self, ctx: TickContext, projectile: Projectile) -> None:
        w = ctx.world
        value = ctx.settings.hit_score
        w.state.score += value
        w.score_hints.append(
            ScoreHint.at(
                Vec2(
                    projectile.position.x + projectile.width / 2,
                    projectile.position.y,
                ),
                value,
                ttl=ctx.settings.score_hint_ttl,
            )
        )
        logger.debug(f"Enemy hit, score {w.state.score}")


@dataclass
class EnemySystem:
    """
    Patrol, draw and fire the enemy, then move its shots against the
    player.
    """

    name: str = "space_game_enemy"
    order: int = 40

    def step(self, ctx: TickContext):
        w = ctx.world
        enemy = w.enemy
        player = w.player

        enemy.patrol(w.patrol, w.state.time_ms / 1000)
        enemy.draw(ctx.surface, ctx.sprites)
        if ctx.settings.show_hitbox:
            enemy.actor.draw_hitbox(ctx.surface)

        if not player.is_dead:
            enemy.try_fire(ctx.rng, ctx.settings.enemy.fire_chance)

        # shots still land on a dead ship
        target = None if w.state.mode is GameMode.ATTRACT else player.hitbox
        enemy.actor.update_projectiles(target, on_hit=lambda _: player.die())
        enemy.actor.draw_projectiles(ctx.surface)


@dataclass
class GameOverSystem:
    name: str = "space_game_game_over"
    order: int = 45

    def step(self, ctx: TickContext):
        w = ctx.world
        if w.state.mode is GameMode.PLAYING and w.player.is_dead:
            w.game_over()


@dataclass
class ScoreHintSystem:
    name: str = "space_game_score_hints"
    order: int = 50

    def step(self, ctx: TickContext):
        w = ctx.world
        if not w.score_hints:
            return

        w.score_hints = [hint for hint in w.score_hints if hint.decay()]
        for hint in w.score_hints:
            hint.draw(ctx.surface)


class GameController:
    """
    Owns the world and runs one tick at a time.

    Input events may arrive at any point between ticks; they only land
    in the intent buffer, which each tick drains once before any system
    runs.
    """

    def __init__(
        self,
        settings: GameSettings | None = None,
        sprites: Mapping[str, Any] | None = None,
        rng: random.Random | None = None,
    ):
        self.settings = settings or GameSettings()
        self.rng = rng if rng is not None else random.Random(self.settings.seed)
        self.sprites: Mapping[str, Any] = sprites if sprites is not None else {}
        self.intents = IntentBuffer()
        self.world = build_world(self.settings, self.rng)
        self.frame_index = 0
        self.systems: SystemPipeline[TickContext] = SystemPipeline()
        self.systems.extend(
            [
                ModeSystem(),
                BackgroundSystem(),
                OverlaySystem(),
                PlayerSystem(),
                EnemySystem(),
                GameOverSystem(),
                ScoreHintSystem(),
            ]
        )
        logger.debug(
            f"Systems: {[system.name for system in self.systems.systems]}"
        )

    @property
    def state(self) -> GameState:
        return self.world.state

    @property
    def mode(self) -> GameMode:
        return self.world.state.mode

    @property
    def score(self) -> int:
        return self.world.state.score

    @property
    def player(self) -> Player:
        return self.world.player

    @property
    def enemy(self) -> Enemy:
        return self.world.enemy

    @property
    def score_hints(self) -> list[ScoreHint]:
        return self.world.score_hints

    def handle_event(self, event: InputEvent) -> None:
        self.intents.push(event)

    def tick(self, now_ms: float, surface: DrawSurface) -> TickContext:
        """
        Run one frame.

        :param now_ms: Current timestamp in milliseconds
        :type now_ms: float

        :param surface: Surface to draw the frame on
        :type surface: DrawSurface

        :return: The context the systems ran with
        :rtype: TickContext
        """
        dt = max(0.0, now_ms - self.world.state.time_ms) / 1000
        self.world.state.time_ms = now_ms
        self.frame_index += 1
        ctx = TickContext(
            input_frame=InputFrame(frame_index=self.frame_index, dt=dt),
            dt=dt,
            world=self.world,
            commands=CommandQueue(),
            surface=surface,
            sprites=self.sprites,
            rng=self.rng,
            settings=self.settings,
            intent=self.intents.drain(),
        )
        self.systems.step(ctx)
        return ctx
