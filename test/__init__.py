from .test_color import TestColor
from .test_jnd import (
    TestJndLabInterval,
    TestNormalization,
    TestNoticeablyDifferent,
    TestToLab,
)
from .test_model import TestLabInterval, TestThresholdModel

__all__ = (
    'TestColor',
    'TestJndLabInterval',
    'TestLabInterval',
    'TestNormalization',
    'TestNoticeablyDifferent',
    'TestThresholdModel',
    'TestToLab',
)
