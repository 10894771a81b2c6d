"""
Basic example of converting positions to and from grid references.
"""

from usngrid import Converter, Datum


def main():
    print("=" * 80)
    print("USNG Grid Converter - Basic Example")
    print("=" * 80)

    converter = Converter()
    lat, lon = 38.8895, -77.0353
    print(f"\nPosition: {lat}, {lon} ({converter.datum.value})")

    # Every precision level, from grid zone to 1 m
    print("\n" + "-" * 80)
    print("Encoding at each precision level...")
    for precision in range(7):
        print(f"  {precision}: {converter.encode(lat, lon, precision)}")
    print(f"MGRS: {converter.encode_mgrs(lat, lon, 5)}")
    print(f"NAD27: {converter.encode_nad27(lat, lon, 5)}")

    # Decode back to the cell and its center
    print("\n" + "-" * 80)
    reference = converter.encode(lat, lon, 5)
    print(f"Decoding {reference}...")
    cell = converter.decode(reference)
    center = converter.decode(reference, center=True)
    print(f"Cell: N {cell.north:.6f} S {cell.south:.6f} E {cell.east:.6f} W {cell.west:.6f}")
    print(f"Center: {center}")
    print(f"Offset from position: {float(center.distance_to(center.from_deg(lat, lon))):.2f} m")
    print(f"UTM: {converter.decode_to_utm(reference)}")

    # Same position on the NAD27 ellipsoid
    print("\n" + "-" * 80)
    nad27 = Converter(Datum.NAD27)
    print(f"NAD27 reference: {nad27.encode(lat, lon, 5)}")

    print("\n" + "=" * 80)
    print("Example completed!")
    print("=" * 80)


if __name__ == "__main__":
    main()
