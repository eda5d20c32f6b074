# config.py
from dataclasses import dataclass, replace
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class TrainingConfig:
    # data
    data_path: Optional[str] = None
    num_train: int = 120
    num_test: int = 30
    feature_scale: float = 8.0

    # network
    hidden_sizes: Tuple[int, ...] = (10, 8)
    learning_rate: float = 0.01
    epochs: int = 300
    seed: Optional[int] = None

    # reporting
    log_every: int = 10
    log_file: Optional[str] = None

    def with_(self, **kwargs) -> "TrainingConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

    def validate(self) -> "TrainingConfig":
        if self.num_train <= 0 or self.num_test < 0:
            raise ValueError("num_train must be positive and num_test non-negative")
        if any(h <= 0 for h in self.hidden_sizes):
            raise ValueError(f"hidden_sizes must be positive widths, got {self.hidden_sizes}")
        if self.learning_rate <= 0:
            raise ValueError(f"learning_rate must be positive, got {self.learning_rate}")
        if self.epochs < 0:
            raise ValueError(f"epochs must be non-negative, got {self.epochs}")
        if self.feature_scale == 0:
            raise ValueError("feature_scale must be non-zero")
        return self
