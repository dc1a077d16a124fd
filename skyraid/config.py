"""Game-wide settings: window, timing, sprite counts and asset locations."""

# Window
GAME_WIDTH = 512
GAME_HEIGHT = 768
GAME_TITLE = "飞机大战 v1.0"
GAME_ICON = "res/app.ico"

# Map
MAP_PATH = "res/img_bg_level_1.jpg"
MAP_SCROLL_SPEED = 1
GAME_RATE = 10  # milliseconds between frames

# Hero
HERO_PATH = "res/hero2.png"
HERO_SPEED = 8

# Bullets
BULLET_PATH = "res/bullet_11.png"
BULLET_SPEED = 12
BULLET_NUM = 30
BULLET_INTERVAL = 20

# Enemies
ENEMY_PATH = "res/img-warplane_5.png"
ENEMY_SPEED = 4
ENEMY_NUM = 20
ENEMY_INTERVAL = 30

# Explosions
BOMB_PATH = "res/exploding-{}.png"
BOMB_NUM = 20
BOMB_MAX = 7
BOMB_INTERVAL = 20
BOMB_FRAME_PATHS = tuple(BOMB_PATH.format(i) for i in range(1, BOMB_MAX + 1))

# Sounds
SOUND_BACKGROUND = "res/bg.wav"
SOUND_BOMB = "res/exploding.wav"

# Killshot
KILLSHOT_COOLDOWN = 3000  # milliseconds