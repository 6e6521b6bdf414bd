import os


try:
    scale_factor = float(os.getenv('REVPICK_SCALE', '1'))
except ValueError:
    scale_factor = 1.0


def scale(value, factor=scale_factor):
    return int(value * factor)


no_margin = 0
margin = scale(4)
large_margin = scale(12)

spacing = scale(4)
button_spacing = scale(12)

dialog_w = scale(520)
dialog_h = scale(200)
