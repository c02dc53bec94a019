from tapir.tap import tap, tapping, Tappable
from tapir.pipe import Pipeable, Pipeline
