"""CLI commands for ring-tracker."""
