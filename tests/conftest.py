import os

import pytest

# Qt tests draw nothing on screen
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


@pytest.fixture(scope='session')
def qapp():
    qt = pytest.importorskip('qt')
    return qt.mkapp()
