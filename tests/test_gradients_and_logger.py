"""
Tests for gradient images and error reporting.

Verifies:
- Saturation/value surface corners (white, pure hue, black)
- Hue strip runs red -> cyan -> red from top to bottom
- numpy pixels become QImages of the same size
- loggerRaise always re-raises; frozen builds log and show a popup first
"""
import logging

import numpy as np
import pytest

from utils import gradients, logger


# ══════════════════════════════════════════════════════════════════════════
# Gradients
# ══════════════════════════════════════════════════════════════════════════

class TestGradients:

    def test_saturation_value_corners(self):
        pixels = gradients.saturation_value_pixels(0, 3, 3)
        assert pixels.shape == (3, 3, 3)
        assert pixels.dtype == np.uint8
        assert pixels[0, 0].tolist() == [255, 255, 255]
        assert pixels[0, 2].tolist() == [255, 0, 0]
        assert pixels[2, 0].tolist() == [0, 0, 0]
        assert pixels[2, 2].tolist() == [0, 0, 0]

    def test_saturation_value_hue(self):
        pixels = gradients.saturation_value_pixels(240, 2, 2)
        assert pixels[0, 1].tolist() == [0, 0, 255]

    def test_hue_strip(self):
        pixels = gradients.hue_strip_pixels(2, 3)
        assert pixels.shape == (3, 2, 3)
        assert pixels[0, 0].tolist() == [255, 0, 0]
        assert pixels[1, 1].tolist() == [0, 255, 255]
        assert pixels[2, 0].tolist() == [255, 0, 0]

    def test_pixels_to_qimage(self, qapp):
        image = gradients.pixels_to_qimage(gradients.saturation_value_pixels(120, 5, 4))
        assert (image.width(), image.height()) == (5, 4)
        assert image.pixelColor(4, 0).getRgb()[:3] == (0, 255, 0)

    def test_rgb_to_qcolor_rounds_half_up(self, qapp):
        color = gradients.rgb_to_qcolor([12.5, 0.49, 254.5])
        assert (color.red(), color.green(), color.blue()) == (13, 0, 255)


# ══════════════════════════════════════════════════════════════════════════
# Logger
# ══════════════════════════════════════════════════════════════════════════

class TestLoggerRaise:

    @pytest.fixture(autouse=True)
    def reset_window(self):
        yield
        logger.set_main_window(None)

    def test_debug_mode_raises(self, monkeypatch):
        monkeypatch.setattr(logger, 'DEBUG_MODE', True)
        with pytest.raises(KeyError):
            logger.loggerRaise(KeyError('pentadic'), "Unknown color scheme")

    def test_frozen_logs_then_raises(self, monkeypatch, caplog):
        monkeypatch.setattr(logger, 'DEBUG_MODE', False)
        logger.set_main_window(None)
        with caplog.at_level(logging.ERROR, logger='HappyColors'):
            with pytest.raises(ValueError):
                logger.loggerRaise(ValueError("bad"), title="Oops")
        assert "Oops: bad" in caplog.text

    def test_frozen_shows_popup(self, monkeypatch):
        popups = []
        monkeypatch.setattr(logger, 'DEBUG_MODE', False)
        monkeypatch.setattr(logger.QMessageBox, 'critical',
                            lambda parent, title, message: popups.append((parent, title, message)))
        window = object()
        logger.set_main_window(window)
        with pytest.raises(ValueError):
            logger.loggerRaise(ValueError("bad"), "Something went wrong")
        assert popups == [(window, "Error", "Something went wrong")]
