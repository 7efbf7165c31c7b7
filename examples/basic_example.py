"""
Basic example of using typed angles.
"""

from angleunit import Degrees, Radians
from angleunit.serialization import dumps, loads


def main():
    print("=" * 80)
    print("Typed Angles - Basic Example")
    print("=" * 80)

    # Build a heading in degrees and turn it
    print("\nTurning a heading...")
    heading = Degrees(45.0)
    heading += Degrees(90.0)
    heading *= 2.0
    print(f"Heading: {heading}")
    print(f"Wrapped into one turn (sign follows dividend): {heading % 360.0}")
    print(f"Quarter turns: {heading / Degrees(90.0)}")

    # Convert explicitly before doing trig
    print("\n" + "-" * 80)
    print("Converting to radians...")
    bearing = Radians.from_degrees(Degrees(30.0))
    sin, cos = Radians.sin_cos(bearing.value)
    print(f"Bearing: {bearing}")
    print(f"sin: {sin:.4f}, cos: {cos:.4f}")
    print(f"Back to degrees: {Degrees.from_radians(Radians.atan2(sin.value, cos.value))}")

    # Mixing units is rejected
    print("\n" + "-" * 80)
    try:
        Degrees(1.0) + Radians(1.0)
    except TypeError as exc:
        print(f"Refused to mix units: {exc}")

    # Serialize as a bare number
    print("\n" + "-" * 80)
    payload = dumps({"heading": heading, "bearing": bearing})
    print(f"JSON: {payload}")
    print(f"Decoded: {loads(dumps(heading), Degrees)}")

    print("\n" + "=" * 80)
    print("Example completed!")
    print("=" * 80)


if __name__ == "__main__":
    main()
