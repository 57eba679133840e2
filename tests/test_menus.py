from emojivshuman.menus import (
    HOVER_COLOR,
    NORMAL_COLOR,
    PRESS_COLOR,
    PauseButton,
    PauseWidget,
)


def _counter(signal):
    calls = []
    signal.connect(lambda *args: calls.append(args))
    return calls


def test_button_click_inside_emits():
    button = PauseButton("菜单")
    calls = _counter(button.clicked)
    button.press()
    assert button.release(50, 20) is True
    assert calls == [()]
    assert button.pressed is False


def test_button_release_outside_does_not_emit():
    button = PauseButton("菜单")
    calls = _counter(button.clicked)
    button.press()
    assert button.release(150, 20) is False
    assert calls == []
    assert button.pressed is False


def test_button_release_without_press_does_not_emit():
    button = PauseButton("菜单")
    calls = _counter(button.clicked)
    assert button.release(10, 10) is False
    assert calls == []


def test_button_colors_follow_state():
    button = PauseButton("菜单")
    assert button.fill_color() == (165, 42, 42)
    button.hover_enter()
    assert button.fill_color() == HOVER_COLOR
    button.press()
    assert button.fill_color() == PRESS_COLOR
    button.release(500, 500)
    button.hover_leave()
    assert button.fill_color() == NORMAL_COLOR


def test_widget_button_texts():
    widget = PauseWidget()
    assert [b.text for b in widget.buttons] == ["继续游戏", "重新开始", "返回主界面"]


def test_widget_buttons_stacked_without_overlap_and_inside():
    widget = PauseWidget()
    rects = [b.scene_rect() for b in widget.buttons]
    for upper, lower in zip(rects, rects[1:]):
        assert upper.bottom < lower.y
        assert upper.x == lower.x
    gaps = [lower.y - upper.bottom for upper, lower in zip(rects, rects[1:])]
    assert gaps[0] == gaps[1]
    for rect in rects:
        assert widget.rect.contains(rect.x, rect.y)
        assert widget.rect.contains(rect.right, rect.bottom)


def test_widget_button_at():
    widget = PauseWidget()
    for button in widget.buttons:
        rect = button.scene_rect()
        assert widget.button_at(rect.x + 1, rect.y + 1) is button
    assert widget.button_at(5, 5) is None


def test_widget_buttons_emit_widget_signals():
    widget = PauseWidget()
    closes = _counter(widget.close)
    restarts = _counter(widget.restart)
    exits = _counter(widget.exit)
    widget.close_button.press()
    widget.close_button.release(1, 1)
    widget.restart_button.press()
    widget.restart_button.release(1, 1)
    widget.exit_button.press()
    widget.exit_button.release(1, 1)
    assert (len(closes), len(restarts), len(exits)) == (1, 1, 1)


def test_widget_click_outside_emits_nothing():
    widget = PauseWidget()
    closes = _counter(widget.close)
    widget.close_button.press()
    widget.close_button.release(-1, -1)
    assert closes == []