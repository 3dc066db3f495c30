"""Certification module: certificates and the progress/certificate workflow."""

from .entities.certificate import Certificate

__all__ = ["Certificate"]
