from .common import Arena, Mode, Outcome, RunSettings, RunState
from .curve import DifficultyCurve, resolve_curve, resolve_curves
from .hits import HitResult, HitZone
from .ledger import BestScoreStore, ScoreLedger
from .run import FrameSnapshot, PresentationSink, RunController, RunResult, TargetView
from .stats import RunStats, ScoreRecord
from .targets import Target, TargetPool, TimedTarget, TrackingTarget

__all__ = [
    "Arena", "Mode", "Outcome", "RunSettings", "RunState",
    "DifficultyCurve", "resolve_curve", "resolve_curves",
    "HitResult", "HitZone",
    "BestScoreStore", "ScoreLedger",
    "FrameSnapshot", "PresentationSink", "RunController", "RunResult", "TargetView",
    "RunStats", "ScoreRecord",
    "Target", "TargetPool", "TimedTarget", "TrackingTarget",
]
