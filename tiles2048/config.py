"""
2048 game configuration.
Default values for every tunable constant of the game.
"""


class GameConfig:
    """Board and rule constants"""

    # board
    SIZE = 4  # fixed 4x4 grid

    # rules
    TARGET_TILE = 11  # 2 ** 11 = 2048
    INITIAL_TILES = 2
    FOUR_PROBABILITY = 0.1  # otherwise a 2 is spawned


class DisplayConfig:
    """Terminal and viewer settings"""

    TILE_WIDTH = 8

    # displayed tile value -> background colour for the viewer
    COLOR_MAP = {
        0: "#CDC1B4",
        2: "#EEE4DA",
        4: "#EDE0C8",
        8: "#F2B179",
        16: "#F59563",
        32: "#F67C5F",
        64: "#F65E3B",
        128: "#EDCF72",
        256: "#EDCC61",
        512: "#EDC850",
        1024: "#EDC53F",
        2048: "#EDC22E",
    }
    DEFAULT_COLOR = "#3C3A32"

    # viewer stylesheet; tiles showing 8 or more use light text
    LIGHT_TEXT_FROM = 8
    BOARD_CSS = """
    <style>
    .board { background-color: #BBADA0; border-radius: 6px; padding: 10px; width: fit-content; }
    .board-row { display: flex; }
    .cell {
        width: 80px; height: 80px; margin: 4px; border-radius: 3px;
        display: flex; justify-content: center; align-items: center;
        font-family: 'Arial', sans-serif; font-weight: bold; font-size: 24px;
        color: #776E65;
    }
    .cell.light { color: #F9F6F2; }
    </style>
    """
