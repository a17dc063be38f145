"""
List Ledger Use Case

Retrieves the transaction ledger with pagination, newest entries first.
"""
from libs.result import Result, Return
from src.app.repositories.account_repository import AccountRepository
from src.app.repositories.ledger_entry_repository import LedgerEntryRepository
from .dtos import ListLedgerResponseDTO, LedgerListItemDTO, to_ledger_entry_dto


class ListLedger:
    """
    Use case: View the ledger

    Entries are ordered by ID DESC (most recent first), with source and
    destination account names resolved for display.
    """

    def __init__(self, ledger_repo: LedgerEntryRepository, account_repo: AccountRepository):
        self.ledger_repo = ledger_repo
        self.account_repo = account_repo

    async def execute(self, limit: int = 50, offset: int = 0) -> Result[ListLedgerResponseDTO]:
        """
        List ledger entries with pagination.

        Args:
            limit: Maximum number of entries to return (default 50)
            offset: Number of entries to skip (default 0)

        Returns:
            Result[ListLedgerResponseDTO]: Paginated ledger
        """
        entries, total = await self.ledger_repo.list_recent(limit=limit, offset=offset)
        names = {account.id: account.name for account in await self.account_repo.get_all()}

        items = [
            LedgerListItemDTO(
                **to_ledger_entry_dto(entry).model_dump(),
                source_account_name=names.get(entry.source_account_id),
                destination_account_name=names.get(entry.destination_account_id),
            )
            for entry in entries
        ]

        return Return.ok(
            ListLedgerResponseDTO(
                entries=items,
                total=total,
                limit=limit,
                offset=offset,
            )
        )
