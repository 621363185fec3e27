"""Minimal Flask service answering ``/ping``."""
