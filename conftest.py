from pathlib import Path
from typing import List, Tuple

import pytest


@pytest.fixture()
def project_root() -> Path:
    """The directory holding setup.py, version.txt and CHANGELOG.md"""
    return Path(__file__).parent


@pytest.fixture()
def off_base_lines() -> List[Tuple[str, int]]:
    """
    Starts one space in, so the base level isn't the empty string
    """
    return [(' ', 1), ('  ', 2), (' ', 3), ('  ', 4), ('  ', 5), (' ', 6)]


@pytest.fixture()
def outline_file(tmp_path) -> str:
    outline = tmp_path / 'outline.txt'
    outline.write_text(
        'fruit\n'
        '  apple\n'
        '    granny smith\n'
        '  pear\n'
        '\n'
        'vegetables\n'
        '  leek\n'
    )
    return str(outline)
