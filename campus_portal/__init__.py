"""Campus portal domain layer: events, certificates and on-duty requests."""

__version__ = "1.0.0"
