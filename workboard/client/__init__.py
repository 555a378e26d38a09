"""Board client: state mirror, drag controller and API access."""
from workboard.client.api import BoardApiClient, BoardApiError
from workboard.client.board import Board
from workboard.client.drag import DragController, DragItem, DragPhase, ItemKind, array_move
from workboard.client.state import BoardState, BoardStore, reduce

__all__ = [
    "Board",
    "BoardApiClient",
    "BoardApiError",
    "BoardState",
    "BoardStore",
    "DragController",
    "DragItem",
    "DragPhase",
    "ItemKind",
    "array_move",
    "reduce",
]
