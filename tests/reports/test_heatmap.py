from src.school_attendance.school_attendance.reports.heatmap import color_for, to_css


def test_extremes_of_the_ramp():
    assert color_for(0, 100) == (255, 200, 200)
    assert color_for(100, 100) == (255, 0, 0)


def test_zero_max_behaves_like_zero_value():
    assert color_for(7, 0) == color_for(0, 0) == (255, 200, 200)


def test_midpoint_rounds_half_up():
    # 50/100 * 255 = 127.5 -> 128 -> 200 - 128
    assert color_for(50, 100) == (255, 72, 72)


def test_ramp_is_monotonic():
    channels = [color_for(v, 10)[1] for v in range(11)]
    assert channels == sorted(channels, reverse=True)


def test_css():
    assert to_css((255, 72, 72)) == "rgb(255, 72, 72)"
