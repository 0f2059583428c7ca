"""Command-line interface for linproj."""

from __future__ import annotations

from linproj.cli.app import main as main
from linproj.cli.parser import build_parser as build_parser
