# cable_cutsim/config/families.py
# Cable-family definitions. The mirror tables are survey ground truth: which
# segment's recorded distance axis runs against the traversal from Point A to
# Point B. Keep them verbatim.

SEA_US = {
    "name": "SEA-US",
    "slug": "sea-us",
    "cut_prefix": "seaus",
    "table_prefix": "sea_us_rpl",
    "segments": [
        {"id": "S1", "label": "S1 - Kauditan", "endpoint": "/sea-us-rpl-s1"},
        {"id": "S2", "label": "S2 - Davao", "endpoint": "/sea-us-rpl-s2"},
        {"id": "S3", "label": "S3 - Piti - BU Davao City", "endpoint": "/sea-us-rpl-s3"},
        {"id": "S4", "label": "S4 - Piti - Hawaii BU", "endpoint": "/sea-us-rpl-s4"},
        {"id": "S5", "label": "S5 - Makaha, Hawaii", "endpoint": "/sea-us-rpl-s5"},
        {"id": "S6", "label": "S6 - Hermosa, USA", "endpoint": "/sea-us-rpl-s6"},
    ],
    "columns": {
        "distance": ["cable_cumulative_total", "cumulative_total", "cable_between_positions"],
    },
    # S6 has no rules: it is always read in its recorded direction
    "mirror_policy": {"kind": "endpoints"},
    "mirror": {
        "S1": {
            "S2": {"a": False, "b": True},
            "S3": {"a": False, "b": True},
            "S4": {"a": False, "b": False},
            "S5": {"a": False, "b": True},
        },
        "S2": {
            "S1": {"a": False, "b": True},
            "S3": {"a": False, "b": True},
            "S4": {"a": False, "b": False},
            "S5": {"a": False, "b": True},
        },
        "S3": {
            "S1": {"a": False, "b": True},
            "S2": {"a": False, "b": True},
            "S4": {"a": True, "b": False},
            "S5": {"a": True, "b": True},
        },
        "S4": {
            "S1": {"a": True, "b": True},
            "S2": {"a": True, "b": True},
            "S3": {"a": True, "b": False},
            "S5": {"a": False, "b": True},
        },
        "S5": {
            "S1": {"a": False, "b": True},
            "S2": {"a": False, "b": True},
            "S3": {"a": False, "b": False},
            "S4": {"a": False, "b": True},
        },
    },
    "extra_cut_types": [],
}

TGN_IA = {
    "name": "TGN-IA",
    "slug": "tgnia",
    "cut_prefix": "tgnia",
    "table_prefix": "tgnia_rpl",
    "segments": [
        {"id": "S1", "label": "S1 | Tenah Merah - BU1", "endpoint": "/tgnia-rpl-s1"},
        {"id": "S2", "label": "S2 | BU1 - BU2", "endpoint": "/tgnia-rpl-s2"},
        {"id": "S3", "label": "S3 | BU2 - BU3", "endpoint": "/tgnia-rpl-s3"},
        {"id": "S4", "label": "S4 | BU3 - BU4", "endpoint": "/tgnia-rpl-s4"},
        {"id": "S5", "label": "S5 | BU4 - BU5", "endpoint": "/tgnia-rpl-s5"},
        {"id": "S6", "label": "S6 | BU5 - BU6", "endpoint": "/tgnia-rpl-s6"},
        {
            "id": "S7",
            "label": "S7 | Malaysia Stub (Clump Weight - BU1)",
            "endpoint": "/tgnia-rpl-s7",
        },
        {"id": "S8", "label": "S8 | Vung Tau - BU2", "endpoint": "/tgnia-rpl-s8"},
        {"id": "S9", "label": "S9 | Deep Water Bay - BU3", "endpoint": "/tgnia-rpl-s9"},
        {"id": "S10", "label": "S10 | Ballesteros - BU4", "endpoint": "/tgnia-rpl-s10"},
        {
            "id": "S11",
            "label": "S11 | China Stub (Clump Weight - BU5)",
            "endpoint": "/tgnia-rpl-s11",
        },
        {
            "id": "S12",
            "label": "S12 | TGN G2 Stub (BU7 - Clump Weight)",
            "endpoint": "/tgnia-rpl-s12",
        },
    ],
    "columns": {
        "distance": [
            "cable_cumulative_total",
            "cumulative_total",
            "cable_between_positions",
            "route_distance_cumm",
        ],
    },
    "mirror_policy": {"kind": "span"},
    "mirror": {
        "S1": {
            "S2": {"a": False, "b": False},
            "S3": {"a": False, "b": False},
            "S4": {"a": False, "b": False},
            "S5": {"a": False, "b": False},
            "S6": {"a": False, "b": False},
            "S7": {"a": False, "b": True},
            "S8": {"a": False, "b": True},
            "S9": {"a": False, "b": True},
            "S10": {"a": False, "b": True},
            "S11": {"a": False, "b": True},
            "S12": {"a": False, "b": True},
        },
        "S2": {
            "S1": {"a": True, "b": True},
            "S3": {"a": False, "b": False},
            "S4": {"a": False, "b": False},
            "S5": {"a": False, "b": False},
            "S6": {"a": False, "b": False},
            "S7": {"a": True, "b": True},
            "S8": {"a": False, "b": True},
            "S9": {"a": False, "b": True},
            "S10": {"a": False, "b": True},
            "S11": {"a": False, "b": True},
            "S12": {"a": False, "b": True},
        },
        "S3": {
            "S1": {"a": True, "b": True},
            "S2": {"a": True, "b": True},
            "S4": {"a": False, "b": False},
            "S5": {"a": False, "b": False},
            "S6": {"a": False, "b": False},
            "S7": {"a": True, "b": True},
            "S8": {"a": True, "b": True},
            "S9": {"a": False, "b": True},
            "S10": {"a": False, "b": True},
            "S11": {"a": False, "b": True},
            "S12": {"a": False, "b": True},
        },
        "S4": {
            "S1": {"a": True, "b": True},
            "S2": {"a": True, "b": True},
            "S3": {"a": True, "b": True},
            "S5": {"a": False, "b": False},
            "S6": {"a": False, "b": False},
            "S7": {"a": True, "b": True},
            "S8": {"a": True, "b": True},
            "S9": {"a": True, "b": True},
            "S10": {"a": False, "b": True},
            "S11": {"a": False, "b": True},
            "S12": {"a": False, "b": True},
        },
        "S5": {
            "S1": {"a": True, "b": True},
            "S2": {"a": True, "b": True},
            "S3": {"a": True, "b": True},
            "S4": {"a": True, "b": True},
            "S6": {"a": False, "b": True},
            "S7": {"a": True, "b": True},
            "S8": {"a": True, "b": True},
            "S9": {"a": True, "b": True},
            "S10": {"a": True, "b": True},
            "S11": {"a": False, "b": True},
            "S12": {"a": False, "b": True},
        },
        "S6": {
            "S1": {"a": True, "b": True},
            "S2": {"a": True, "b": True},
            "S3": {"a": True, "b": True},
            "S4": {"a": True, "b": True},
            "S5": {"a": True, "b": True},
            "S7": {"a": True, "b": True},
            "S8": {"a": True, "b": True},
            "S9": {"a": True, "b": True},
            "S10": {"a": True, "b": True},
            "S11": {"a": True, "b": True},
            "S12": {"a": False, "b": True},
        },
        "S7": {
            "S1": {"a": False, "b": True},
            "S2": {"a": False, "b": False},
            "S3": {"a": False, "b": False},
            "S4": {"a": False, "b": False},
            "S5": {"a": False, "b": False},
            "S6": {"a": False, "b": False},
            "S8": {"a": False, "b": True},
            "S9": {"a": False, "b": True},
            "S10": {"a": False, "b": True},
            "S11": {"a": False, "b": True},
            "S12": {"a": False, "b": True},
        },
        "S8": {
            "S1": {"a": False, "b": True},
            "S2": {"a": False, "b": True},
            "S3": {"a": False, "b": False},
            "S4": {"a": False, "b": False},
            "S5": {"a": False, "b": False},
            "S6": {"a": False, "b": False},
            "S7": {"a": False, "b": True},
            "S9": {"a": False, "b": True},
            "S10": {"a": False, "b": True},
            "S11": {"a": False, "b": True},
            "S12": {"a": False, "b": True},
        },
        "S9": {
            "S1": {"a": False, "b": True},
            "S2": {"a": False, "b": False},
            "S3": {"a": False, "b": False},
            "S4": {"a": False, "b": False},
            "S5": {"a": False, "b": False},
            "S6": {"a": False, "b": False},
            "S7": {"a": False, "b": True},
            "S8": {"a": False, "b": True},
            "S10": {"a": False, "b": True},
            "S11": {"a": False, "b": True},
            "S12": {"a": False, "b": True},
        },
        "S10": {
            "S1": {"a": False, "b": True},
            "S2": {"a": False, "b": True},
            "S3": {"a": False, "b": True},
            "S4": {"a": False, "b": True},
            "S5": {"a": False, "b": False},
            "S6": {"a": False, "b": False},
            "S7": {"a": False, "b": True},
            "S8": {"a": False, "b": True},
            "S9": {"a": False, "b": True},
            "S11": {"a": False, "b": True},
            "S12": {"a": False, "b": True},
        },
        "S11": {
            "S1": {"a": False, "b": True},
            "S2": {"a": False, "b": True},
            "S3": {"a": False, "b": True},
            "S4": {"a": False, "b": True},
            "S5": {"a": False, "b": True},
            "S6": {"a": False, "b": True},
            "S7": {"a": False, "b": True},
            "S8": {"a": False, "b": True},
            "S9": {"a": False, "b": True},
            "S10": {"a": False, "b": True},
            "S12": {"a": False, "b": True},
        },
        "S12": {
            "S1": {"a": False, "b": True},
            "S2": {"a": False, "b": True},
            "S3": {"a": False, "b": True},
            "S4": {"a": False, "b": True},
            "S5": {"a": False, "b": True},
            "S6": {"a": False, "b": True},
            "S7": {"a": False, "b": True},
            "S8": {"a": False, "b": True},
            "S9": {"a": False, "b": True},
            "S10": {"a": False, "b": True},
            "S11": {"a": False, "b": True},
        },
    },
    "extra_cut_types": ["Unclassified"],
}

FAMILIES = {
    "sea-us": SEA_US,
    "tgnia": TGN_IA,
}
