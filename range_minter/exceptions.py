"""
범위 민팅 오류 정의

모든 오류는 작업 전체를 중단시키며 호출자에게 그대로 전파됩니다.
"""


class RangeMinterError(Exception):
    """range_minter 기본 오류"""
    pass


class InvalidAddress(RangeMinterError, ValueError):
    """0 주소 또는 형식이 잘못된 권한 주소"""
    pass


class InvalidWidth(RangeMinterError, ValueError):
    """width 파라미터가 [0, 1000) 범위를 벗어남"""
    pass


class ArithmeticPrecondition(RangeMinterError, ArithmeticError):
    """고정소수점 연산 전제조건 위반 (0 나눗셈, uint256 오버플로우/언더플로우)"""
    pass


class CallbackAuthorization(RangeMinterError, PermissionError):
    """콜백 호출자가 결정적으로 계산된 풀 주소와 다름"""
    pass


class DegenerateRange(RangeMinterError, ValueError):
    """정렬 후 tick_lower >= tick_upper"""
    pass


class InsufficientFunds(RangeMinterError):
    """잔고 또는 allowance 부족"""
    pass


class SimulatedPoolError(RangeMinterError):
    """시뮬레이션 풀의 mint 검증 실패"""
    pass
