"""Boards API adapter."""

from honeycomb_client.application.dto.boards import Board
from honeycomb_client.domain.ports import BoardsPort
from honeycomb_client.infrastructure.http.executor import RequestExecutor


class BoardsAPI(BoardsPort):
    """Boards backed by the Honeycomb API."""

    def __init__(self, executor: RequestExecutor) -> None:
        self.executor = executor

    async def list(self) -> list[Board]:
        return await self.executor.do("GET", "/1/boards", response_type=list[Board])

    async def get(self, board_id: str) -> Board:
        return await self.executor.do("GET", f"/1/boards/{board_id}", response_type=Board)

    async def create(self, board: Board) -> Board:
        return await self.executor.do("POST", "/1/boards", board, response_type=Board)

    async def update(self, board: Board) -> Board:
        return await self.executor.do("PUT", f"/1/boards/{board.id}", board, response_type=Board)

    async def delete(self, board_id: str) -> None:
        await self.executor.do("DELETE", f"/1/boards/{board_id}")
