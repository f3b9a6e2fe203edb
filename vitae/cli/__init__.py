"""Command-line entry points: vitae-build and vitae-deploy."""
