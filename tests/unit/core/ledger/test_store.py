"""
core/ledger/store.py, core/ledger/models.py 테스트

계좌 upsert, 거래 기록 보관, 스냅샷 분리
"""

import pytest

from core.constants import AmountLimits
from core.domain.amount import Amount, AmountOverflowError
from core.ledger import Account, LedgerStore, TxRecord
from core.types import DisputeState, TxKind


class TestAccount:
    """Account 모델 테스트"""

    def test_defaults(self) -> None:
        """0 잔고, 미잠금"""
        account = Account()

        assert account.available == Amount.zero()
        assert account.held == Amount.zero()
        assert account.locked is False

    def test_total(self) -> None:
        """total = available + held"""
        account = Account(available=Amount.parse("1.5"), held=Amount.parse("2.25"))

        assert account.total == Amount.parse("3.75")

    def test_total_overflow(self) -> None:
        """total 계산도 범위 검사"""
        account = Account(available=Amount(AmountLimits.I64_MAX), held=Amount(1))

        with pytest.raises(AmountOverflowError):
            account.total

    def test_defaults_not_shared(self) -> None:
        """기본값 인스턴스 공유 안 함"""
        a = Account()
        b = Account()
        a.available = Amount(1)

        assert b.available == Amount.zero()


class TestTxRecord:
    """TxRecord 모델 테스트"""

    def test_default_state(self) -> None:
        """기본 상태 NORMAL"""
        record = TxRecord(client=1, kind=TxKind.DEPOSIT, amount=Amount(10))

        assert record.state == DisputeState.NORMAL


class TestLedgerStoreAccounts:
    """LedgerStore 계좌 관련 테스트"""

    def test_account_or_create_inserts_zero_account(self) -> None:
        """없으면 생성"""
        store = LedgerStore()

        account = store.account_or_create(7)

        assert account == Account()
        assert store.account_count == 1

    def test_account_or_create_returns_same_object(self) -> None:
        """있으면 같은 객체 반환 (변경 가능)"""
        store = LedgerStore()
        store.account_or_create(7).available = Amount(5)

        assert store.account_or_create(7).available == Amount(5)
        assert store.account_count == 1

    def test_account_if_exists_does_not_create(self) -> None:
        """조회만 (생성 안 함)"""
        store = LedgerStore()

        assert store.account_if_exists(1) is None
        assert store.account_count == 0

    def test_all_accounts_snapshot(self) -> None:
        """스냅샷은 저장소와 분리됨"""
        store = LedgerStore()
        store.account_or_create(1).available = Amount(100)
        store.account_or_create(2).locked = True

        snapshot = dict(store.all_accounts())
        snapshot[1].available = Amount(999)

        assert set(snapshot) == {1, 2}
        assert snapshot[2].locked is True
        assert store.account_if_exists(1).available == Amount(100)

    def test_all_accounts_empty(self) -> None:
        """계좌 없음"""
        assert list(LedgerStore().all_accounts()) == []


class TestLedgerStoreTransactions:
    """LedgerStore 거래 기록 테스트"""

    def test_insert_and_lookup(self) -> None:
        """추가 후 조회"""
        store = LedgerStore()
        record = TxRecord(client=1, kind=TxKind.WITHDRAWAL, amount=Amount(10))

        store.insert_transaction(42, record)

        assert store.has_transaction(42)
        assert store.transaction(42) is record
        assert store.transaction_count == 1

    def test_unknown_tx(self) -> None:
        """없는 거래"""
        store = LedgerStore()

        assert store.transaction(1) is None
        assert not store.has_transaction(1)

    def test_record_is_mutable_through_store(self) -> None:
        """조회한 기록의 상태 변경이 저장소에 반영"""
        store = LedgerStore()
        store.insert_transaction(1, TxRecord(client=1, kind=TxKind.DEPOSIT, amount=Amount(10)))

        store.transaction(1).state = DisputeState.DISPUTED

        assert store.transaction(1).state == DisputeState.DISPUTED
