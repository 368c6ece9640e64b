from raikou.layout.attached import AttachedLayout, CanvasPosition, Dock, GridPlacement


def test_defaults():
    attached = AttachedLayout()
    assert attached.dock is Dock.LEFT
    assert attached.canvas == CanvasPosition(None, None, None, None)
    assert attached.grid == GridPlacement(row=0, column=0, row_span=1, column_span=1)


def test_instances_do_not_share_state():
    a = AttachedLayout()
    b = AttachedLayout()
    a.grid.row = 3
    a.canvas.left = 5.0
    assert b.grid.row == 0
    assert b.canvas.left is None
    assert a != b


def test_dock_member_order():
    assert [Dock(d.value).name for d in Dock] == ["LEFT", "BOTTOM", "RIGHT", "TOP"]