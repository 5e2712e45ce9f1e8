ASSETS_PATH: str = "./assets/"
SKINS_PATH: str = ASSETS_PATH + "skins/"

# Tile palette handed to the engine at construction
TILESET_PATH: str = SKINS_PATH + "original/icons32.png"
