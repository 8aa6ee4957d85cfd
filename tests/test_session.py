import pytest

from chromapick import ColorModel, EditorSession, SessionSnapshot, SLIDERS
from chromapick.errors import SessionClosed


@pytest.fixture
def saved():
    return []


@pytest.fixture
def updates():
    return []


@pytest.fixture
def session(saved, updates):
    return EditorSession(on_save=saved.append, on_update=updates.append)


def test_slider_specs():
    assert [(s.channel, s.minimum, s.maximum, s.step) for s in SLIDERS] == [
        ("hue", 0, 360, 1),
        ("saturation", 0, 100, 1),
        ("lightness", 0, 100, 1),
        ("opacity", 0, 1, 0.01),
    ]
    assert [s.label for s in SLIDERS] == ["Hue", "Saturation", "Lightness", "Opacity"]

def test_initial_snapshot(session):
    assert session.snapshot() == SessionSnapshot(
        hue=0.0, saturation=100.0, lightness=50.0, opacity=1.0,
        hex="#FF0000FF", css="rgba(255, 0, 0, 1)",
    )

def test_slider_change_pushes_update(session, updates):
    session.set_channel("hue", 120)
    session.set_channel("opacity", 0.5)
    assert [u.hex for u in updates] == ["#00FF00FF", "#00FF0080"]
    assert updates[-1].css == "rgba(0, 255, 0, 0.5)"

def test_hex_input_moves_sliders(session, updates):
    assert session.input_hex("#33669980") is True
    snapshot = updates[-1]
    assert (snapshot.hue, snapshot.saturation, snapshot.lightness) == (210.0, 50.0, 40.0)
    assert snapshot.opacity == 128 / 255
    assert snapshot.hex == "#33669980"

def test_partial_hex_input_is_ignored(session, updates):
    for partial in ("#", "#33", "#33669", "#3366998"):
        assert session.input_hex(partial) is False
    assert updates == []
    assert session.snapshot().hex == "#FF0000FF"

def test_save_emits_css_and_closes(session, saved):
    session.set_channel("lightness", 25)
    result = session.save()
    assert result == "rgba(128, 0, 0, 1)"
    assert saved == [result]
    assert session.closed

def test_closed_session_refuses_use(session, saved):
    session.save()
    with pytest.raises(SessionClosed):
        session.set_channel("hue", 10)
    with pytest.raises(SessionClosed):
        session.input_hex("#000000")
    with pytest.raises(SessionClosed):
        session.save()
    with pytest.raises(SessionClosed):
        session.snapshot()
    assert len(saved) == 1

def test_close_without_saving(session, saved, updates):
    session.close()
    session.close()
    assert session.closed
    assert saved == []
    # The model no longer reports to a closed session
    session.model.set_hue(90)
    assert updates == []

def test_session_uses_given_model(saved):
    model = ColorModel()
    model.set_opacity(0.25)
    session = EditorSession(on_save=saved.append, model=model)
    assert session.model is model
    assert session.save() == "rgba(255, 0, 0, 0.25)"

def test_session_without_update_callback(saved):
    session = EditorSession(on_save=saved.append)
    session.set_channel("saturation", 0)
    assert session.snapshot().hex == "#808080FF"
