TITLE = "Cell Puzzle"
# Window size used until the engine reports its own world size
WIDTH = 640
HEIGHT = 480
FPS = 60
VSYNC = True
# Grace period between tileset decode and engine construction (ms)
SETTLE_DELAY_MS = 100
# Transparent tileset pixels resolve to this colour
PALETTE_BACKGROUND = (0x60, 0x80, 0x50)
# Persisted key-value store
STORAGE_PATH = "./save/local_storage.json"
LEVEL_KEY = "current_level"
# "module:attribute" of the engine factory, called as factory(palette, level)
ENGINE = "engines.preview:PreviewEngine"
# Inventory strip under the game area (0 disables it)
STATUS_BAR_HEIGHT = 24
STATUS_BAR_COLOR = (20, 20, 20)
STATUS_TEXT_COLOR = (230, 230, 230)
FONT_SIZE = 22
# Preview engine
TILE_SIZE = 32
PREVIEW_COLUMNS = 8
PREVIEW_ROWS = 6
# Print startup phase timings
LOG_TIMING = False
