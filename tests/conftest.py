"""
Pytest configuration and fixtures for cvfacade tests
"""

import cv2
import numpy as np
import pytest

from cvfacade.config import get_settings


@pytest.fixture
def color_image():
    """Create a test color image (BGR)"""
    image = np.zeros((100, 100, 3), dtype=np.uint8)
    cv2.rectangle(image, (20, 20), (80, 80), (255, 128, 64), -1)
    cv2.circle(image, (50, 50), 20, (0, 255, 0), -1)
    return image


@pytest.fixture
def grayscale_image():
    """Create a test grayscale image"""
    image = np.zeros((100, 100), dtype=np.uint8)
    cv2.rectangle(image, (20, 20), (80, 80), 200, -1)
    cv2.circle(image, (50, 50), 20, 100, -1)
    return image


@pytest.fixture
def binary_square():
    """Create a binary image with a single filled square"""
    image = np.zeros((100, 100), dtype=np.uint8)
    image[30:70, 30:70] = 255
    return image


@pytest.fixture
def canvas():
    """Create a blank BGR canvas for drawing tests"""
    return np.zeros((100, 100, 3), dtype=np.uint8)


@pytest.fixture
def unit_square():
    """Unit square polygon traversed (0,0) -> (1,0) -> (1,1) -> (0,1)"""
    return np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=np.float32)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Keep cached settings from leaking between tests"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
