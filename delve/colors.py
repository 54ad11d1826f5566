# Type alias for RGB colors
Color = tuple[int, int, int]

# Basic colors
WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
DARK_YELLOW: Color = (127, 127, 0)

# Map colors
DARK_WALL: Color = (0, 0, 100)
DARK_GROUND: Color = (50, 50, 150)

# Entity colors
PLAYER_COLOR: Color = WHITE
NPC_COLOR: Color = DARK_YELLOW
