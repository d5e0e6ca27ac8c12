"""Display, input and game-balance constants shared across the game."""

# Display
SCREEN_WIDTH = 170
SCREEN_HEIGHT = 320
SCREEN_ROTATION = 2

# 16-bit RGB565 colours
COLOR_BLACK = 0x0000
COLOR_WHITE = 0xFFFF
COLOR_RED = 0xF800
COLOR_GREEN = 0x07E0
COLOR_BLUE = 0x001F
COLOR_YELLOW = 0xFFE0
COLOR_CYAN = 0x07FF
COLOR_MAGENTA = 0xF81F
COLOR_ORANGE = 0xFD20
COLOR_PURPLE = 0x8010
COLOR_GRAY = 0x8410
COLOR_DARK_GRAY = 0x4208
COLOR_LIGHT_GRAY = 0xC618

# UI colours
COLOR_BACKGROUND = COLOR_BLACK
COLOR_TEXT = COLOR_WHITE
COLOR_HIGHLIGHT = COLOR_YELLOW
COLOR_MENU_SELECT = COLOR_BLUE
COLOR_HEALTH_FULL = COLOR_GREEN
COLOR_HEALTH_LOW = COLOR_RED
COLOR_MANA = COLOR_BLUE
COLOR_XP = COLOR_PURPLE

# Input timing
INPUT_DEBOUNCE_MS = 50
INPUT_HOLD_THRESHOLD_MS = 500
INPUT_REPEAT_DELAY_MS = 150

# Wizard starting stats
WIZARD_START_HP = 40
WIZARD_START_ATK = 8
WIZARD_START_DEF = 6
WIZARD_START_SPD = 12
WIZARD_START_MANA = 50

PLAYER_START_HP = WIZARD_START_HP
PLAYER_START_ATK = WIZARD_START_ATK
PLAYER_START_DEF = WIZARD_START_DEF
PLAYER_START_SPD = WIZARD_START_SPD

# Mana system
MANA_REGEN_PER_TURN = 0
MANA_POTION_RESTORE = 25
MANA_POTION_COST = 20

# Base spell costs by tier
BASIC_SPELL_COST = 5
MEDIUM_SPELL_COST = 8
ADVANCED_SPELL_COST = 12

# Dungeon progression
ROOMS_PER_FLOOR = 10
FLOORS_PER_DUNGEON = 5

# Items
STARTING_POTIONS = 3
STARTING_GOLD = 100
POTION_HEAL_AMOUNT = 30
HEALTH_POTION_COST = 25
MIN_DAMAGE = 1

LIBRARY_REST_COST = 20

# Enemy stats
GOBLIN_HP, GOBLIN_ATK, GOBLIN_DEF, GOBLIN_SPD = 25, 8, 3, 12
SKELETON_HP, SKELETON_ATK, SKELETON_DEF, SKELETON_SPD = 35, 10, 6, 8
ORC_HP, ORC_ATK, ORC_DEF, ORC_SPD = 60, 15, 8, 6
TROLL_HP, TROLL_ATK, TROLL_DEF, TROLL_SPD = 100, 20, 12, 4
DRAGON_HP, DRAGON_ATK, DRAGON_DEF, DRAGON_SPD = 150, 25, 15, 8

# Combat
MAX_COMBAT_TURNS = 20
DEFEND_BONUS_MULTIPLIER = 1.5

# Spell synergy system
SPELL_SYNERGY_BONUS = 5
SHIELD_DECAY_RATE = 1
MAX_SPELL_EFFECTS = 10

# Combat layout
COMBAT_SPRITE_AREA_HEIGHT = 200
COMBAT_MENU_AREA_HEIGHT = 120
COMBAT_MENU_Y_START = 200

# Menu layout
MENU_ITEM_HEIGHT = 20
MENU_MARGIN_X = 10
MENU_MARGIN_Y = 10
MENU_TEXT_SIZE = 1

# Health bars
HEALTH_BAR_WIDTH = 60
HEALTH_BAR_HEIGHT = 8
HEALTH_BAR_MARGIN = 5

# System
MAIN_LOOP_DELAY_MS = 10
MAX_COMBAT_LOG_ENTRIES = 10
MAX_INVENTORY_SLOTS = 15

GAME_VERSION = "0.2.0"
GAME_TITLE = "ESP32 Wizard Dungeon Crawler"