"""Data models for kubepulse."""
