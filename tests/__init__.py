"""Tests for playlist-source."""
