"""Filesystem and console helpers for license-file-generator."""
