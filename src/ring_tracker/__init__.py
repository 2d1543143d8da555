"""ring-tracker: 18-week gymnastics rings program tracker."""

__version__ = "0.1.0"
