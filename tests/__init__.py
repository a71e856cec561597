"""Test suite for easelut.

Test Structure:
- unit/: Unit tests for individual components
  - curves/: Quantization, reference solver, evaluators, registry, comparison
  - config/: Config models and JSON/YAML loading
  - utils/: JSON and logging helpers
  - cli/: Command-line entry point
- conftest.py: Shared fixtures and test configuration
"""
