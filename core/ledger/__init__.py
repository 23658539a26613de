"""
Ledger 시스템

고객 계좌와 거래 기록을 메모리에서 관리하고, 입력 Command를
순서대로 적용하여 최종 잔고를 만든다.

사용 예시:
```python
from core.ledger import LedgerStore, TransactionEngine

store = LedgerStore()
engine = TransactionEngine(store)

for command in commands:
    outcome = engine.apply(command)

for client, account in store.all_accounts():
    print(client, account.available, account.held, account.total, account.locked)
```
"""

from core.ledger.engine import TransactionEngine
from core.ledger.models import Account, TxRecord
from core.ledger.store import LedgerStore

__all__ = [
    # 핵심 클래스
    "LedgerStore",
    "TransactionEngine",
    # 모델
    "Account",
    "TxRecord",
]
