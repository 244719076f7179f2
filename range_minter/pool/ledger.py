"""
Token Ledger - 메모리 내 ERC20 잔고/allowance 장부

풀 시뮬레이션에서 토큰 이동을 담당합니다. atomic() 블록 안에서
예외가 발생하면 블록 진입 시점의 잔고, allowance, 등록된 풀 상태로 복원하여
트랜잭션 revert와 같은 효과를 냅니다.
"""

import copy
import logging
from collections import defaultdict
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Protocol, Tuple

from ..exceptions import InsufficientFunds, ArithmeticPrecondition
from .address import normalize_address

logger = logging.getLogger(__name__)


class StatefulParticipant(Protocol):
    """장부와 함께 되돌려야 하는 상태 (시뮬레이션 풀 등)"""

    def snapshot(self) -> Any: ...

    def restore(self, state: Any) -> None: ...


class TokenLedger:
    """ERC20 스타일 장부

    사용법:
        ledger = TokenLedger()
        ledger.mint(token0, user, 10**18)
        ledger.approve(token0, user, spender, 10**18)
        ledger.transfer_from(token0, spender, user, pool, 10**18)
    """

    def __init__(self):
        self._balances: Dict[str, Dict[str, int]] = defaultdict(dict)
        self._allowances: Dict[Tuple[str, str, str], int] = {}
        self._participants: List[StatefulParticipant] = []

    def register(self, participant: StatefulParticipant):
        """atomic() 블록에서 장부와 함께 복원될 상태 보유자 등록 (예: 풀)"""
        self._participants.append(participant)

    def balance_of(self, token: str, owner: str) -> int:
        return self._balances[normalize_address(token)].get(normalize_address(owner), 0)

    def allowance(self, token: str, owner: str, spender: str) -> int:
        key = (normalize_address(token), normalize_address(owner), normalize_address(spender))
        return self._allowances.get(key, 0)

    def mint(self, token: str, owner: str, amount: int):
        """잔고 발행 (시뮬레이션 초기화용)"""
        if amount < 0:
            raise ArithmeticPrecondition(f"발행 수량은 음수일 수 없습니다: {amount}")
        token, owner = normalize_address(token), normalize_address(owner)
        self._balances[token][owner] = self._balances[token].get(owner, 0) + amount

    def approve(self, token: str, owner: str, spender: str, amount: int):
        if amount < 0:
            raise ArithmeticPrecondition(f"승인 수량은 음수일 수 없습니다: {amount}")
        key = (normalize_address(token), normalize_address(owner), normalize_address(spender))
        self._allowances[key] = amount

    def transfer(self, token: str, sender: str, recipient: str, amount: int):
        """sender → recipient 이동

        Raises:
            InsufficientFunds: 잔고 부족
        """
        if amount < 0:
            raise ArithmeticPrecondition(f"전송 수량은 음수일 수 없습니다: {amount}")
        token = normalize_address(token)
        sender, recipient = normalize_address(sender), normalize_address(recipient)

        balance = self._balances[token].get(sender, 0)
        if balance < amount:
            raise InsufficientFunds(
                f"잔고 부족: {sender} 보유 {balance}, 필요 {amount} ({token})"
            )
        self._balances[token][sender] = balance - amount
        self._balances[token][recipient] = self._balances[token].get(recipient, 0) + amount

    def transfer_from(self, token: str, spender: str, owner: str, recipient: str, amount: int):
        """spender가 owner의 allowance로 recipient에게 전송

        Raises:
            InsufficientFunds: allowance 또는 잔고 부족
        """
        key = (normalize_address(token), normalize_address(owner), normalize_address(spender))
        allowed = self._allowances.get(key, 0)
        if allowed < amount:
            raise InsufficientFunds(
                f"allowance 부족: {owner} → {spender} 승인 {allowed}, 필요 {amount}"
            )
        self.transfer(token, owner, recipient, amount)
        self._allowances[key] = allowed - amount

    @contextmanager
    def atomic(self) -> Iterator["TokenLedger"]:
        """블록 내 예외 발생 시 모든 잔고/allowance와 등록된 참여자 상태 복원"""
        balances = copy.deepcopy(self._balances)
        allowances = dict(self._allowances)
        snapshots = [(participant, participant.snapshot()) for participant in self._participants]
        try:
            yield self
        except BaseException:
            self._balances = balances
            self._allowances = allowances
            for participant, state in snapshots:
                participant.restore(state)
            logger.debug("Ledger state restored after failed atomic block")
            raise
