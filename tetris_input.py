
"""Held-key tracker"""
import pygame

class KeyState:
    def __init__(self):
        self.pressed = set()
    def handle(self, e):
        if e.type == pygame.KEYDOWN: self.pressed.add(e.key)
        elif e.type == pygame.KEYUP: self.pressed.discard(e.key)
    def is_pressed(self, key) -> bool:
        return key in self.pressed
