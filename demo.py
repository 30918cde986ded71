import time

import streamlit as st

from tiles2048.board import board_to_values
from tiles2048.config import DisplayConfig
from tiles2048.game import Direction, Game, Snapshot, Status
from tiles2048.render import result_line


def new_game(seed=None):
    st.session_state.game = Game(seed=seed)


def _cell_html(value) -> str:
    color = DisplayConfig.COLOR_MAP.get(int(value), DisplayConfig.DEFAULT_COLOR)
    light = " light" if value >= DisplayConfig.LIGHT_TEXT_FROM else ""
    label = str(value) if value else ""
    return f'<div class="cell{light}" style="background-color: {color};">{label}</div>'


def display_2048_board(snapshot: Snapshot):
    """Draw the board as coloured tiles, followed by score, highest tile and move count."""
    board = board_to_values(snapshot.board)

    rows = "".join(
        '<div class="board-row">' + "".join(_cell_html(v) for v in row) + "</div>" for row in board
    )
    st.markdown(DisplayConfig.BOARD_CSS, unsafe_allow_html=True)
    st.markdown(f'<div class="board">{rows}</div>', unsafe_allow_html=True)

    st.markdown("---")
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Score", snapshot.score)
    with col2:
        st.metric("Highest Tile", int(board.max()))
    with col3:
        st.metric("Moves made", snapshot.moves)


if __name__ == "__main__":
    st.title("2048")

    if "seed" not in st.session_state:
        st.session_state.seed = int(time.time()) % 100000
    st.number_input("Seed", min_value=0, step=1, key="seed")
    if st.button("New game") or "game" not in st.session_state:
        new_game(int(st.session_state.seed))

    game: Game = st.session_state.game

    cols = st.columns(4)
    for col, direction in zip(cols, [Direction.LEFT, Direction.DOWN, Direction.RIGHT, Direction.UP]):
        with col:
            if st.button(direction.name.title(), disabled=game.over):
                game.move(direction)

    snapshot = game.snapshot()
    display_2048_board(snapshot)

    if snapshot.status is Status.WON:
        st.success(result_line(snapshot))
    elif snapshot.status is Status.LOST:
        st.error(result_line(snapshot))
