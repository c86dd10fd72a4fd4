"""
Presentation-side feedback fired by the enemy AI.

The AI never waits on these: a damage flash is posted as a custom pygame
event for the renderer to pick up, and the hit cue plays a sound if one
has been loaded. Both do nothing when pygame (or its mixer) is not
initialised, so the AI runs unchanged in headless simulations and tests.
"""

from typing import Optional

import pygame

# Custom events the renderer listens for
DAMAGE_FLASH_EVENT = pygame.USEREVENT + 1
HIT_SOUND_EVENT = pygame.USEREVENT + 2


class Feedback:
    """Fire-and-forget screen/sound cues."""

    def __init__(self, hit_sound: Optional["pygame.mixer.Sound"] = None) -> None:
        self.hit_sound = hit_sound
        self.flashes_fired: int = 0
        self.sounds_fired: int = 0

    def flash_damage(self) -> None:
        """Ask the renderer to flash the screen red."""
        self.flashes_fired += 1
        if not pygame.get_init() or not pygame.display.get_init():
            return
        pygame.event.post(pygame.event.Event(DAMAGE_FLASH_EVENT))

    def play_hit_sound(self) -> None:
        """Play the hit cue, or announce it to listeners if no sound is loaded."""
        self.sounds_fired += 1
        if self.hit_sound is not None and pygame.mixer.get_init():
            self.hit_sound.play()
            return
        if pygame.get_init() and pygame.display.get_init():
            pygame.event.post(pygame.event.Event(HIT_SOUND_EVENT))


class SilentFeedback(Feedback):
    """Feedback that only counts cues (headless runs)."""

    def flash_damage(self) -> None:
        self.flashes_fired += 1

    def play_hit_sound(self) -> None:
        self.sounds_fired += 1
