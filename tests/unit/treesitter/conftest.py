"""Pytest fixtures for treesitter tests."""

import pytest

from tsdocs_core.treesitter.parser.factory import ParserFactory


@pytest.fixture
def typescript_source_code():
    """Sample TypeScript source code for testing."""
    return b"""
export interface User {
    id: number;
    name?: string;
    greet(prefix: string): string;
}
"""


@pytest.fixture
def tsx_source_code():
    """Sample TSX source code for testing."""
    return b"""
export interface ButtonProps {
    label: string;
}

export const Button = (props: ButtonProps) => <button>{props.label}</button>;
"""


@pytest.fixture(autouse=True)
def reset_factory():
    """Reset the ParserFactory cache before each test."""
    ParserFactory.reset()
    yield
    ParserFactory.reset()
