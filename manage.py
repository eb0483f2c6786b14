"""
This is the main file to run the game.
It imports the run function from the space_game app and runs it.
"""

from space_game.app import run

if __name__ == "__main__":
    run()
