"""
Game scenes
"""
