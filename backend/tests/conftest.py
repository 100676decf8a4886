"""Shared test fixtures."""

from __future__ import annotations

import pytest

from app.store.designs import DesignStore


# Sample SVGs

SIMPLE_RECTS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100">
  <rect x="10" y="10" width="100" height="50" fill="#4ECDC4"/>
  <rect x="120" y="20" width="60" height="50"/>
</svg>'''

OUT_OF_BOUNDS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100px" height="100px">
  <rect x="-5" y="10" width="20" height="20" fill="red"/>
  <rect x="10" y="10" width="20" height="20" fill="blue"/>
</svg>'''

VIEWBOX_ONLY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 200 150">
  <rect x="0" y="0" width="200" height="150" fill="#eeeeee"/>
</svg>'''

NO_DIMENSIONS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <rect x="0" y="0" width="50" height="50"/>
</svg>'''

EMPTY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

PATH_RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <path d="M10 10 L50 10 L50 40 L10 40 Z" fill="#FF6B6B"/>
</svg>'''

DEGENERATE_PATHS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <path d="M5 5"/>
  <path d="M0 0 L10 0" stroke="#000"/>
  <path d="M20 0 V30"/>
</svg>'''

NESTED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="300" height="200">
  <rect x="0" y="0" width="10" height="10" fill="#000001"/>
  <path d="M20 20 h30 v30 h-30 z" fill="#000002"/>
  <g>
    <rect x="100" y="100" width="10" height="10" fill="#000003"/>
    <g>
      <rect x="150" y="150" width="10" height="10" fill="#000004"/>
    </g>
    <svg>
      <rect x="200" y="100" width="10" height="10" fill="#000005"/>
    </svg>
  </g>
</svg>'''

COVERAGE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100">
  <rect x="0" y="0" width="100" height="50"/>
  <rect x="50" y="25" width="60" height="50"/>
</svg>'''

MALFORMED_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><rect x="1"></svg>'


@pytest.fixture
def simple_rects_svg() -> str:
    return SIMPLE_RECTS_SVG


@pytest.fixture
def nested_svg() -> str:
    return NESTED_SVG


@pytest.fixture
def design_store(tmp_path) -> DesignStore:
    return DesignStore(tmp_path / "designs", tmp_path / "uploads")
