"""
constants.py: Centralized configuration for the world, bird, pipes and input.
"""

import pygame

# -------- World Config --------
GAME_WIDTH = 480
GAME_HEIGHT = 800
GAME_FPS = 60                   # One simulation tick per rendered frame
WINDOW_TITLE = "flappy bird"

# -------- Bird Config (pixels / tick) --------
BIRD_SIZE = GAME_WIDTH // 10
BIRD_X = BIRD_SIZE              # Fixed bird X position
BIRD_START_Y = (GAME_HEIGHT - BIRD_SIZE) / 2
GRAVITY = 0.61                  # Velocity gained every tick
JUMP_SPEED = 9.8                # A jump sets velocity to -JUMP_SPEED
ACTION_NUM = 4                  # Animation frames
IDLE_SPACE = GAME_FPS // 6      # Ticks per animation frame

# -------- Pipe Config --------
PIPE_WIDTH = GAME_WIDTH // 10
PIPE_MIN_HEIGHT = GAME_HEIGHT // 4
PIPE_MAX_HEIGHT = GAME_HEIGHT // 2   # Also the pipe texture height
PIPE_INIT_SPEED = 1.0
PIPE_SPEED_STEP = 0.5
PIPE_SPEED_STEP_EVERY = 10      # Speed up each time score hits a multiple of this
PIPE_INIT_SPACE = BIRD_SIZE * 1.5

COLLISION_TOLERANCE = 1.0

# -------- Assets & Rendering --------
RESOURCE_DIR = "resource"
FONT_FILE = "LiberationMono-Regular.ttf"
FONT_SIZE = 30
BACKGROUND_COLOR = (0, 191, 255)
PIPE_COLOR = (0, 150, 0)
BIRD_COLOR = (255, 215, 0)
TEXT_COLOR = (0, 0, 0)
OVERLAY_COLOR = (230, 41, 55)

# -------- Key Bindings --------
KEY_JUMP = pygame.K_SPACE       # Also starts and restarts the game
KEY_PAUSE = pygame.K_ESCAPE
KEY_QUIT = pygame.K_q
