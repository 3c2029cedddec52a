# Andy Zhao
"""
Response map -> corner mask.

Policies (exactly one per call):
  - LocalMaxima():                 pixels strictly above all 8 neighbours
  - ThresholdPolicy(Absolute(t)):  response > t
  - ThresholdPolicy(Percentile(p)): response > percentile(response, p)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

import numpy as np

from .. import config
from ..errors import InvalidParameterError
from ..imaging import local_maxima, percentile
from ..types import CornerMask, Percentile, ResponseMap, Threshold, as_threshold

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalMaxima:
    pass


@dataclass(frozen=True)
class ThresholdPolicy:
    threshold: Threshold


ExtractionPolicy = Union[LocalMaxima, ThresholdPolicy]


def make_policy(policy: ExtractionPolicy | Threshold | float | None = None) -> ExtractionPolicy:
    """
    Build a policy from the shorthand forms callers pass:
      None              -> LocalMaxima()
      number / Absolute -> absolute threshold
      Percentile        -> percentile threshold
    """
    if policy is None:
        return LocalMaxima()
    if isinstance(policy, (LocalMaxima, ThresholdPolicy)):
        return policy
    return ThresholdPolicy(as_threshold(policy))


def resolve_threshold(response: ResponseMap, threshold: Threshold | float) -> float:
    """
    Turn a threshold into the scalar compared against the response.
    """
    threshold = as_threshold(threshold)
    if isinstance(threshold, Percentile):
        return percentile(response, threshold.p)
    return float(threshold.value)


def extract_corners(response: ResponseMap, policy: ExtractionPolicy | Threshold | float | None = None) -> CornerMask:
    """
    Select corner pixels from a response map.

    Output:
      (H,W) bool mask, same shape as response
    """
    response = np.asarray(response, dtype=np.float64)
    if response.ndim != 2:
        raise InvalidParameterError(f"extract_corners expects (H,W) response, got {response.shape}")

    policy = make_policy(policy)

    if isinstance(policy, LocalMaxima):
        mask = local_maxima(response)
        mode = "local_maxima"
    else:
        value = resolve_threshold(response, policy.threshold)
        mask = response > value
        kind = "percentile" if isinstance(policy.threshold, Percentile) else "absolute"
        mode = f"{kind}>{value:.6g}"

    if config.DEBUG:
        logger.debug("extract %s: %d corners", mode, int(np.count_nonzero(mask)))
    return mask
