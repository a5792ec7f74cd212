"""
Risk Assessment Module

충돌 위험 평가:
- CPA 계산 및 상태 분류 (VALID / RECEDING / NO_RELATIVE_MOTION)
"""

from .cpa import calculate_cpa
from .types import CpaStatus, CpaResult

__all__ = [
    'calculate_cpa',
    'CpaStatus',
    'CpaResult',
]
