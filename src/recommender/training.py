"""
Synthetic training data for the course scorer.

There are no real relevance labels. Every feature vector is copied a few
times with small uniform noise, and each noisy copy is labeled by a label
function looking only at the copy itself. The default label function marks a
row positive when the mean of its score fraction and consistency exceeds a
threshold, so the "ground truth" is derived from the inputs. Swap the label
function to experiment with other heuristics.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import numpy as np

from ..config import config
from .features import FeatureVector, to_matrix

logger = logging.getLogger(__name__)

LabelFunction = Callable[[np.ndarray], int]


def average_performance_label(row: np.ndarray, threshold: Optional[float] = None) -> int:
    """
    Label a (perturbed) feature row.

    Returns 1 iff (score fraction + consistency) / 2 > threshold.
    """
    if threshold is None:
        threshold = config.recommender.label_threshold
    avg_score = (row[0] + row[2]) / 2
    return 1 if avg_score > threshold else 0


@dataclass
class TrainingSet:
    """Synthetic design matrix and binary labels."""
    X: np.ndarray
    y: np.ndarray

    def __len__(self) -> int:
        return int(self.X.shape[0])

    @property
    def classes(self) -> np.ndarray:
        return np.unique(self.y)


def perturb(
    row: np.ndarray,
    rng: np.random.Generator,
    noise_scale: Optional[float] = None,
) -> np.ndarray:
    """Jitter every component independently by (U(0,1) - 0.5) * noise_scale."""
    if noise_scale is None:
        noise_scale = config.recommender.noise_scale
    return row + (rng.random(row.shape) - 0.5) * noise_scale


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Random generator for one training run (seed falls back to config)."""
    if seed is None:
        seed = config.recommender.random_seed
    return np.random.default_rng(seed)


def prepare_training_data(
    features: Sequence[FeatureVector],
    label_fn: LabelFunction = average_performance_label,
    rng: Optional[np.random.Generator] = None,
    copies: Optional[int] = None,
) -> Optional[TrainingSet]:
    """
    Expand feature vectors into a noisy, heuristically labeled training set.

    Args:
        features: Extracted feature vectors
        label_fn: Maps a perturbed row to 0 or 1
        rng: Random generator (a fresh one from make_rng() if None)
        copies: Noisy copies per vector (config.recommender.copies_per_vector if None)

    Returns:
        TrainingSet with len(features) * copies rows, or None if there is
        nothing to train on
    """
    if not features:
        return None

    if copies is None:
        copies = config.recommender.copies_per_vector
    if rng is None:
        rng = make_rng()

    base = to_matrix(features)
    rows = []
    labels = []

    for source in base:
        for _ in range(copies):
            noisy = perturb(source, rng)
            rows.append(noisy)
            labels.append(label_fn(noisy))

    if not rows:
        return None

    training = TrainingSet(X=np.vstack(rows), y=np.asarray(labels, dtype=int))
    logger.debug(
        "Prepared %d synthetic rows from %d vector(s), %d positive",
        len(training),
        len(features),
        int(training.y.sum()),
    )
    return training
