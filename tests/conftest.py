import sys
from pathlib import Path

import pytest

# Allow importing vitrine from repository root
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from vitrine.host import build_host
from vitrine.navigator import GalleryNavigator
from vitrine.state import AppState
from vitrine.types import Image, Rect

MAIN_RECT = Rect(200, 0, 600, 400)
STRIP_RECT = Rect(0, 0, 120, 400)


def make_images(n, prefix="m"):
    return [Image(media_id=f"{prefix}{i}", position=i, width=400, height=300) for i in range(n)]


def make_host(n, strip_rect=STRIP_RECT):
    return build_host(make_images(n), MAIN_RECT, strip_rect)


@pytest.fixture
def nav4():
    return GalleryNavigator(make_host(4))


@pytest.fixture
def events(nav4):
    received = []
    nav4.subscribe(received.append)
    return received


@pytest.fixture
def app_state(nav4):
    return AppState(navigator=nav4)
