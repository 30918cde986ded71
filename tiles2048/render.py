from tiles2048.board import board_to_values
from tiles2048.config import DisplayConfig
from tiles2048.game import Snapshot, Status


def _h_line(edge: str, fill: str, width: int, count: int) -> str:
    return edge + edge.join([fill * width] * count) + edge


def format_board(snapshot: Snapshot, tile_width: int = DisplayConfig.TILE_WIDTH) -> str:
    """Render a snapshot as a framed text grid with the score on top."""
    values = board_to_values(snapshot.board)
    size = len(values)
    border = _h_line("+", "-", tile_width, size)
    padding = _h_line("|", " ", tile_width, size)

    lines = [f"Score: {snapshot.score}", ""]
    for row in values:
        cells = [(str(v) if v else "").center(tile_width) for v in row]
        lines += [border, padding, "|" + "|".join(cells) + "|", padding]
    lines.append(border)
    return "\n".join(lines)


def result_line(snapshot: Snapshot) -> str:
    if snapshot.status is Status.WON:
        return f"You WIN, with score {snapshot.score}!"
    if snapshot.status is Status.LOST:
        return f"You LOSE, with score {snapshot.score}!"
    return f"Game stopped after {snapshot.moves} moves, with score {snapshot.score}."
