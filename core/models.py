from datetime import datetime, timezone
from typing import NamedTuple, Optional


class MintTransaction(NamedTuple):
    to: str
    data: str
    gas: int

    def as_dict(self):
        return {
            'to': self.to,
            'data': self.data,
            'gas': self.gas,
        }


class MintResult(NamedTuple):
    success: bool
    message: str
    tx_hash: Optional[str] = None
    wallet: Optional[int] = None

    def to_dict(self):
        result = {
            'walletIndex': self.wallet,
            'success': self.success,
            'message': self.message,
        }
        if self.tx_hash is not None:
            result['txHash'] = self.tx_hash

        return result


def success_rate(success_count: int, total_count: int) -> str:
    if not total_count:
        return '0.0'
    return f'{success_count / total_count * 100:.1f}'


def build_report(results, contract_address: str, now: datetime | None = None):
    """Собирает итоговый отчёт по всем кошелькам"""
    now = now or datetime.now(timezone.utc)

    total_count = len(results)
    success_count = sum(1 for result in results if result.success)

    return {
        'timestamp': now.isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
        'contractAddress': contract_address,
        'totalCount': total_count,
        'successCount': success_count,
        'failureCount': total_count - success_count,
        'successRate': success_rate(success_count, total_count),
        'results': [result.to_dict() for result in results],
    }
