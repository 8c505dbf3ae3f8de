import logging
import datetime

from qt import QtCore, mkapp, run_app
from clock import ClockView


logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = mkapp()
clock = ClockView()
clock.setWindowTitle("Clock")
clock.resize(300, 300)
clock.set_datetime(datetime.datetime.now())
clock.show()


def update():
    clock.set_datetime(datetime.datetime.now(), animated=True)


timer = QtCore.QTimer()
timer.timeout.connect(update)
timer.start(1000)

run_app()
