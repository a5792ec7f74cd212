"""
geonav-core - Quick Start Example

기본적인 great circle 계산과 CPA 평가
"""
from geonav_core import (
    GeographicPosition,
    distance_nm,
    bearing,
    final_bearing,
    midpoint,
    update_position,
    calculate_cpa,
)
from geonav_core.locations import resolve
from geonav_core.utils import to_dms


def main():
    print("=" * 60)
    print("geonav-core - Quick Start")
    print("=" * 60)

    # 1. Great circle: San Diego → Philadelphia
    print("\n[Great Circle]")
    start = resolve('SanDiego-CA')
    end = resolve('Philadelphia-PA')
    print(f"Start: {start}")
    print(f"End:   {end}")
    print(f"Distance:        {distance_nm(start, end):.1f} nm")
    print(f"Initial bearing: {bearing(start, end):.1f}°")
    print(f"Final bearing:   {final_bearing(start, end):.1f}°")
    print(f"Midpoint:        {midpoint(start, end)}")

    lat = to_dms('latitude', end.latitude)
    print(f"End latitude:    {lat.degrees}°{lat.minutes}'{lat.seconds}\" {lat.direction}")

    # 2. Dead reckoning
    print("\n[Dead Reckoning]")
    dr = update_position(start, 65.8, 2053.8)
    print(f"065.8° x 2053.8 nm from San Diego: {dr}")

    # 3. CPA
    print("\n[Closest Point of Approach]")
    own = GeographicPosition(0.0, 0.0)
    target = GeographicPosition(1.0, 0.1)
    print(f"Own Ship:    {own}, crs=000°, spd=10 kt")
    print(f"Target Ship: {target}, stopped")

    result = calculate_cpa(own, 0.0, 10.0, target, 0.0, 0.0)
    print(result)

    if result.is_valid and abs(result.range_at_cpa_nm) < 2.0:
        print("⚠️  CPA inside 2 nm - 회피 조치 필요!")
    else:
        print("✓ 정상 항해 유지")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
