import cv2
import numpy as np
import pytest


def make_qr(data, size=400, border=40):
    enc = cv2.QRCodeEncoder.create()
    qr = enc.encode(data)
    qr = cv2.resize(qr, (size, size), interpolation=cv2.INTER_NEAREST)
    return cv2.copyMakeBorder(qr, border, border, border, border, cv2.BORDER_CONSTANT, value=255)


@pytest.fixture
def qr_factory(tmp_path):
    if not hasattr(cv2, 'QRCodeEncoder'):
        pytest.skip('OpenCV build without QRCodeEncoder')

    def _write(data, name='code.png'):
        path = tmp_path / name
        cv2.imwrite(str(path), make_qr(data))
        return path
    return _write


@pytest.fixture
def blank_image():
    return np.full((200, 200), 255, dtype=np.uint8)
