"""
Ledger 저장소

고객 계좌와 거래 기록을 메모리에 보관.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterator

from core.ledger.models import Account, TxRecord
from core.types import ClientId, TxId

logger = logging.getLogger(__name__)


class LedgerStore:
    """Ledger 저장소

    계좌 맵과 거래 기록 맵의 유일한 소유자.
    모든 변경은 이 클래스의 접근 메서드를 통해서만 이루어짐.

    사용 예시:
    ```python
    store = LedgerStore()
    account = store.account_or_create(1)
    store.insert_transaction(10, TxRecord(client=1, kind=TxKind.DEPOSIT, amount=amount))

    for client, snapshot in store.all_accounts():
        print(client, snapshot.total)
    ```
    """

    def __init__(self) -> None:
        self._accounts: dict[ClientId, Account] = {}
        self._transactions: dict[TxId, TxRecord] = {}

    # -------------------------------------------------------------------------
    # 계좌
    # -------------------------------------------------------------------------

    def account_or_create(self, client: ClientId) -> Account:
        """계좌 조회, 없으면 0 잔고/미잠금 상태로 생성 (upsert)

        Args:
            client: 고객 ID

        Returns:
            변경 가능한 Account
        """
        account = self._accounts.get(client)
        if account is None:
            account = Account()
            self._accounts[client] = account
            logger.debug(f"Account created: client={client}")
        return account

    def account_if_exists(self, client: ClientId) -> Account | None:
        """계좌 조회 (생성하지 않음)"""
        return self._accounts.get(client)

    def all_accounts(self) -> Iterator[tuple[ClientId, Account]]:
        """전체 계좌 스냅샷 (리포트용)

        호출 시점의 복사본을 반환하므로 저장소 내부 상태와 분리됨.
        순서는 보장하지 않음.

        Returns:
            (client, Account 복사본) 이터레이터
        """
        snapshot = [(client, replace(account)) for client, account in self._accounts.items()]
        return iter(snapshot)

    @property
    def account_count(self) -> int:
        return len(self._accounts)

    # -------------------------------------------------------------------------
    # 거래 기록
    # -------------------------------------------------------------------------

    def transaction(self, tx: TxId) -> TxRecord | None:
        """거래 기록 조회 (변경 가능한 객체 반환)"""
        return self._transactions.get(tx)

    def has_transaction(self, tx: TxId) -> bool:
        return tx in self._transactions

    def insert_transaction(self, tx: TxId, record: TxRecord) -> None:
        """거래 기록 추가

        중복 검사는 호출자 책임 (이 메서드는 거부하지 않음).

        Args:
            tx: 거래 ID
            record: 거래 기록
        """
        self._transactions[tx] = record

    @property
    def transaction_count(self) -> int:
        return len(self._transactions)
