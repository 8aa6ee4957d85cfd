"""Basic Chromapick usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import logging

from chromapick import ColorModel, EditorSession, SLIDERS, setup_logging


def demonstrate_model() -> None:
    # Adjust channels and read the derived forms.
    model = ColorModel()
    model.set_hue(210)
    model.set_saturation(60)
    model.set_lightness(35)
    model.set_opacity(0.8)
    print("RGB:", model.to_rgb())
    print("Hex:", model.to_hex())
    print("CSS:", model.to_css())

    # Typed hex goes back to whole-number HSL.
    model.set_from_hex("#33669980")
    print("From hex:", model.values)

    # Strip for painting the hue slider background.
    print("Hue track:", model.channel_track("hue", steps=7).tolist())


def demonstrate_session() -> None:
    # What a host UI wires up for one color dialog.
    for slider in SLIDERS:
        print(f"{slider.label}: {slider.minimum}..{slider.maximum} step {slider.step}")

    session = EditorSession(
        on_save=lambda css: print("Saved", css),
        on_update=lambda snapshot: print("Repaint", snapshot.hex),
    )
    session.set_channel("hue", 120)
    session.input_hex("#3366")       # still typing, ignored
    session.input_hex("#336699")
    session.save()


if __name__ == "__main__":
    setup_logging(logging.INFO)
    demonstrate_model()
    demonstrate_session()
