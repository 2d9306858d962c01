# tests/conftest.py
import os
import sys

# Add the project root directory to sys.path so that "import app" works
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


def osrm_ok_payload(coords, distance_m=5200.0, duration_s=3900.0):
    """
    Minimal OSRM /route answer with GeoJSON geometry and two legs of steps.
    `coords` is a list of [lon, lat] pairs.
    """
    return {
        "code": "Ok",
        "routes": [
            {
                "distance": distance_m,
                "duration": duration_s,
                "geometry": {"type": "LineString", "coordinates": coords},
                "legs": [
                    {
                        "steps": [
                            {
                                "name": "Drottninggatan",
                                "distance": 120.5,
                                "duration": 90.0,
                                "maneuver": {"type": "depart", "instruction": "Head north"},
                            },
                            {
                                "name": "Kungsgatan",
                                "distance": 300.0,
                                "duration": 210.0,
                                "maneuver": {"type": "turn"},
                            },
                        ]
                    },
                    {
                        "steps": [
                            {
                                "name": "",
                                "distance": 0.0,
                                "duration": 0.0,
                                "maneuver": {"type": "arrive"},
                            },
                        ]
                    },
                ],
            }
        ],
    }
