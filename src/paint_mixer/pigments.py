"""Pigment reference table.

Published spectral data for common artist paints (Golden, Winsor & Newton,
Daniel Smith) expressed as K/S ratios at 31 bands, 400–700 nm in 10 nm steps.
The ratios were derived from measured reflectance with K/S = (1 - R)^2 / (2R).

Entries are plain mappings so collaborators can extend the table without code
changes; :func:`paint_mixer.catalog.default_catalog` turns them into
:class:`~paint_mixer.catalog.Pigment` records and validates the band count.
"""

PIGMENTS = (
    # Whites
    {
        "id": "titanium-white",
        "name": "Titanium White",
        "brand": "Golden",
        "pigment_code": "PW6",
        "medium": "acrylic",
        "hex": "#F8F8F5",
        "opacity": 1.0,
        "ratios": (
            0.003, 0.003, 0.003, 0.003, 0.003, 0.003, 0.003, 0.003,
            0.003, 0.003, 0.003, 0.003, 0.003, 0.003, 0.003, 0.003,
            0.003, 0.003, 0.003, 0.003, 0.003, 0.003, 0.003, 0.003,
            0.003, 0.003, 0.003, 0.003, 0.003, 0.003, 0.003,
        ),
    },
    {
        "id": "zinc-white",
        "name": "Zinc White",
        "brand": "Winsor & Newton",
        "pigment_code": "PW4",
        "medium": "oil",
        "hex": "#EFEFE8",
        "opacity": 0.5,
        "ratios": (
            0.012, 0.012, 0.011, 0.011, 0.010, 0.010, 0.010, 0.010,
            0.010, 0.010, 0.010, 0.010, 0.010, 0.010, 0.010, 0.009,
            0.009, 0.009, 0.009, 0.009, 0.009, 0.009, 0.009, 0.009,
            0.009, 0.009, 0.009, 0.009, 0.009, 0.009, 0.009,
        ),
    },
    # Blacks
    {
        "id": "ivory-black",
        "name": "Ivory Black",
        "brand": "Winsor & Newton",
        "pigment_code": "PBk9",
        "medium": "oil",
        "hex": "#1C1A18",
        "opacity": 1.0,
        "ratios": (
            18.5, 18.2, 17.8, 17.5, 17.0, 16.5, 16.0, 15.5,
            15.0, 14.5, 14.0, 13.5, 13.0, 12.5, 12.0, 11.5,
            11.0, 10.5, 10.0, 9.5, 9.2, 9.0, 8.8, 8.7,
            8.6, 8.5, 8.5, 8.5, 8.4, 8.4, 8.3,
        ),
    },
    {
        "id": "carbon-black",
        "name": "Carbon Black",
        "brand": "Golden",
        "pigment_code": "PBk7",
        "medium": "acrylic",
        "hex": "#111111",
        "opacity": 1.0,
        "ratios": (
            22.0, 22.0, 22.0, 22.0, 22.0, 22.0, 22.0, 22.0,
            22.0, 22.0, 22.0, 22.0, 22.0, 22.0, 22.0, 22.0,
            22.0, 22.0, 22.0, 22.0, 22.0, 22.0, 22.0, 22.0,
            22.0, 22.0, 22.0, 22.0, 22.0, 22.0, 22.0,
        ),
    },
    # Yellows
    {
        "id": "cadmium-yellow-medium",
        "name": "Cadmium Yellow Medium",
        "brand": "Winsor & Newton",
        "pigment_code": "PY35",
        "medium": "oil",
        "hex": "#F5C842",
        "opacity": 1.0,
        "ratios": (
            12.0, 11.5, 10.8, 9.5, 7.8, 5.6, 3.2, 1.5,
            0.6, 0.25, 0.12, 0.07, 0.05, 0.04, 0.04, 0.04,
            0.04, 0.04, 0.04, 0.04, 0.04, 0.04, 0.05, 0.05,
            0.06, 0.07, 0.08, 0.10, 0.12, 0.15, 0.18,
        ),
    },
    {
        "id": "hansa-yellow-medium",
        "name": "Hansa Yellow Medium",
        "brand": "Golden",
        "pigment_code": "PY74",
        "medium": "acrylic",
        "hex": "#F2C93C",
        "opacity": 0.6,
        "ratios": (
            10.5, 10.0, 9.2, 7.8, 5.5, 3.5, 1.8, 0.7,
            0.28, 0.12, 0.07, 0.05, 0.04, 0.04, 0.04, 0.04,
            0.04, 0.04, 0.04, 0.04, 0.04, 0.05, 0.06, 0.07,
            0.08, 0.10, 0.12, 0.15, 0.18, 0.22, 0.26,
        ),
    },
    {
        "id": "yellow-ochre",
        "name": "Yellow Ochre",
        "brand": "Daniel Smith",
        "pigment_code": "PY43",
        "medium": "watercolor",
        "hex": "#C8952A",
        "opacity": 0.85,
        "ratios": (
            8.0, 7.5, 6.8, 5.5, 3.9, 2.5, 1.4, 0.7,
            0.3, 0.15, 0.09, 0.07, 0.06, 0.06, 0.06, 0.07,
            0.08, 0.09, 0.10, 0.12, 0.15, 0.18, 0.22, 0.28,
            0.35, 0.42, 0.50, 0.58, 0.65, 0.70, 0.73,
        ),
    },
    {
        "id": "naples-yellow",
        "name": "Naples Yellow",
        "brand": "Winsor & Newton",
        "pigment_code": "PY41",
        "medium": "oil",
        "hex": "#E8D28A",
        "opacity": 1.0,
        "ratios": (
            5.0, 4.5, 3.8, 2.8, 1.6, 0.9, 0.5, 0.3,
            0.18, 0.12, 0.09, 0.07, 0.06, 0.06, 0.06, 0.06,
            0.06, 0.06, 0.07, 0.07, 0.08, 0.09, 0.10, 0.12,
            0.14, 0.16, 0.19, 0.22, 0.26, 0.30, 0.34,
        ),
    },
    {
        "id": "indian-yellow",
        "name": "Indian Yellow",
        "brand": "Daniel Smith",
        "pigment_code": "PY153",
        "medium": "watercolor",
        "hex": "#E8A820",
        "opacity": 0.4,
        "ratios": (
            11.0, 10.5, 9.5, 7.8, 5.5, 3.2, 1.5, 0.55,
            0.18, 0.07, 0.05, 0.04, 0.04, 0.04, 0.04, 0.05,
            0.05, 0.06, 0.07, 0.09, 0.11, 0.14, 0.17, 0.21,
            0.26, 0.31, 0.36, 0.41, 0.45, 0.49, 0.52,
        ),
    },
    # Oranges
    {
        "id": "cadmium-orange",
        "name": "Cadmium Orange",
        "brand": "Winsor & Newton",
        "pigment_code": "PO20",
        "medium": "oil",
        "hex": "#E86010",
        "opacity": 1.0,
        "ratios": (
            14.0, 13.5, 12.8, 11.5, 9.5, 7.0, 4.2, 2.0,
            0.8, 0.3, 0.12, 0.07, 0.05, 0.05, 0.05, 0.06,
            0.07, 0.08, 0.10, 0.12, 0.15, 0.19, 0.24, 0.30,
            0.37, 0.44, 0.50, 0.56, 0.60, 0.63, 0.65,
        ),
    },
    {
        "id": "pyrrole-orange",
        "name": "Pyrrole Orange",
        "brand": "Golden",
        "pigment_code": "PO73",
        "medium": "acrylic",
        "hex": "#E85520",
        "opacity": 0.95,
        "ratios": (
            15.5, 15.0, 14.0, 12.5, 10.0, 7.2, 4.0, 1.8,
            0.65, 0.22, 0.09, 0.05, 0.05, 0.05, 0.06, 0.07,
            0.09, 0.11, 0.14, 0.18, 0.23, 0.29, 0.36, 0.42,
            0.48, 0.53, 0.58, 0.62, 0.65, 0.67, 0.68,
        ),
    },
    {
        "id": "burnt-sienna",
        "name": "Burnt Sienna",
        "brand": "Daniel Smith",
        "pigment_code": "PBr7",
        "medium": "watercolor",
        "hex": "#AA4818",
        "opacity": 0.8,
        "ratios": (
            7.0, 6.5, 5.8, 4.8, 3.5, 2.3, 1.3, 0.7,
            0.35, 0.18, 0.10, 0.08, 0.07, 0.08, 0.09, 0.11,
            0.14, 0.18, 0.23, 0.28, 0.33, 0.38, 0.42, 0.45,
            0.48, 0.50, 0.51, 0.52, 0.52, 0.52, 0.52,
        ),
    },
    {
        "id": "raw-sienna",
        "name": "Raw Sienna",
        "brand": "Winsor & Newton",
        "pigment_code": "PBr7",
        "medium": "oil",
        "hex": "#C87830",
        "opacity": 0.75,
        "ratios": (
            5.5, 5.0, 4.4, 3.5, 2.3, 1.4, 0.75, 0.38,
            0.18, 0.10, 0.07, 0.06, 0.06, 0.07, 0.08, 0.10,
            0.13, 0.16, 0.20, 0.25, 0.31, 0.37, 0.43, 0.48,
            0.52, 0.55, 0.57, 0.58, 0.59, 0.59, 0.59,
        ),
    },
    # Reds
    {
        "id": "cadmium-red-medium",
        "name": "Cadmium Red Medium",
        "brand": "Winsor & Newton",
        "pigment_code": "PR108",
        "medium": "oil",
        "hex": "#C82020",
        "opacity": 1.0,
        "ratios": (
            13.0, 12.5, 11.5, 9.5, 7.0, 4.5, 2.5, 1.2,
            0.5, 0.2, 0.09, 0.06, 0.05, 0.05, 0.06, 0.08,
            0.11, 0.16, 0.22, 0.30, 0.40, 0.52, 0.63, 0.72,
            0.78, 0.82, 0.84, 0.85, 0.85, 0.85, 0.84,
        ),
    },
    {
        "id": "pyrrole-red",
        "name": "Pyrrole Red",
        "brand": "Golden",
        "pigment_code": "PR254",
        "medium": "acrylic",
        "hex": "#C81818",
        "opacity": 0.95,
        "ratios": (
            14.5, 14.0, 13.0, 11.0, 8.2, 5.2, 2.8, 1.2,
            0.45, 0.18, 0.08, 0.06, 0.05, 0.06, 0.07, 0.10,
            0.15, 0.22, 0.32, 0.44, 0.57, 0.68, 0.76, 0.81,
            0.84, 0.85, 0.85, 0.85, 0.84, 0.83, 0.82,
        ),
    },
    {
        "id": "quinacridone-red",
        "name": "Quinacridone Red",
        "brand": "Daniel Smith",
        "pigment_code": "PR122",
        "medium": "watercolor",
        "hex": "#D02858",
        "opacity": 0.5,
        "ratios": (
            12.0, 11.5, 10.5, 8.8, 6.5, 4.0, 2.0, 0.85,
            0.3, 0.12, 0.06, 0.05, 0.05, 0.06, 0.09, 0.15,
            0.24, 0.36, 0.52, 0.68, 0.80, 0.89, 0.93, 0.93,
            0.88, 0.78, 0.62, 0.45, 0.31, 0.22, 0.18,
        ),
    },
    {
        "id": "alizarin-crimson",
        "name": "Alizarin Crimson",
        "brand": "Winsor & Newton",
        "pigment_code": "PR83",
        "medium": "oil",
        "hex": "#8C1820",
        "opacity": 0.7,
        "ratios": (
            9.0, 8.8, 8.5, 7.8, 6.5, 5.0, 3.5, 2.2,
            1.3, 0.75, 0.42, 0.25, 0.16, 0.12, 0.11, 0.13,
            0.18, 0.27, 0.40, 0.56, 0.70, 0.81, 0.87, 0.88,
            0.83, 0.72, 0.55, 0.38, 0.25, 0.17, 0.13,
        ),
    },
    {
        "id": "burnt-umber",
        "name": "Burnt Umber",
        "brand": "Daniel Smith",
        "pigment_code": "PBr7",
        "medium": "watercolor",
        "hex": "#582810",
        "opacity": 0.9,
        "ratios": (
            6.5, 6.0, 5.5, 4.8, 3.8, 2.8, 1.9, 1.2,
            0.75, 0.45, 0.28, 0.18, 0.13, 0.11, 0.11, 0.13,
            0.16, 0.21, 0.27, 0.33, 0.38, 0.42, 0.44, 0.45,
            0.45, 0.44, 0.43, 0.41, 0.39, 0.38, 0.36,
        ),
    },
    {
        "id": "raw-umber",
        "name": "Raw Umber",
        "brand": "Golden",
        "pigment_code": "PBr7",
        "medium": "acrylic",
        "hex": "#705028",
        "opacity": 0.9,
        "ratios": (
            4.5, 4.2, 3.8, 3.2, 2.5, 1.8, 1.2, 0.75,
            0.45, 0.28, 0.18, 0.14, 0.12, 0.12, 0.13, 0.15,
            0.18, 0.22, 0.27, 0.32, 0.36, 0.39, 0.41, 0.42,
            0.42, 0.41, 0.40, 0.38, 0.36, 0.34, 0.32,
        ),
    },
    # Violets / magentas
    {
        "id": "dioxazine-purple",
        "name": "Dioxazine Purple",
        "brand": "Golden",
        "pigment_code": "PV23",
        "medium": "acrylic",
        "hex": "#400878",
        "opacity": 0.95,
        "ratios": (
            3.5, 3.2, 2.8, 2.2, 1.6, 1.0, 0.6, 0.3,
            0.15, 0.09, 0.07, 0.08, 0.12, 0.20, 0.32, 0.48,
            0.64, 0.76, 0.82, 0.80, 0.70, 0.55, 0.38, 0.24,
            0.14, 0.09, 0.07, 0.06, 0.06, 0.06, 0.06,
        ),
    },
    {
        "id": "quinacridone-violet",
        "name": "Quinacridone Violet",
        "brand": "Daniel Smith",
        "pigment_code": "PV19",
        "medium": "watercolor",
        "hex": "#882060",
        "opacity": 0.45,
        "ratios": (
            5.0, 4.8, 4.4, 3.8, 3.0, 2.2, 1.5, 0.9,
            0.5, 0.28, 0.16, 0.12, 0.14, 0.22, 0.38, 0.58,
            0.75, 0.86, 0.88, 0.80, 0.65, 0.46, 0.28, 0.16,
            0.09, 0.06, 0.05, 0.05, 0.05, 0.06, 0.07,
        ),
    },
    {
        "id": "ultramarine-violet",
        "name": "Ultramarine Violet",
        "brand": "Winsor & Newton",
        "pigment_code": "PV15",
        "medium": "oil",
        "hex": "#503888",
        "opacity": 0.7,
        "ratios": (
            4.0, 3.7, 3.3, 2.6, 1.9, 1.2, 0.7, 0.38,
            0.20, 0.12, 0.09, 0.10, 0.15, 0.26, 0.42, 0.60,
            0.74, 0.82, 0.82, 0.74, 0.60, 0.44, 0.28, 0.16,
            0.10, 0.07, 0.06, 0.06, 0.07, 0.08, 0.09,
        ),
    },
    # Blues
    {
        "id": "phthalo-blue-gs",
        "name": "Phthalo Blue (Green Shade)",
        "brand": "Golden",
        "pigment_code": "PB15:3",
        "medium": "acrylic",
        "hex": "#183050",
        "opacity": 0.98,
        "ratios": (
            2.5, 2.2, 1.8, 1.3, 0.85, 0.52, 0.30, 0.18,
            0.12, 0.10, 0.12, 0.20, 0.35, 0.56, 0.74, 0.84,
            0.85, 0.76, 0.60, 0.42, 0.27, 0.17, 0.11, 0.08,
            0.07, 0.07, 0.08, 0.09, 0.10, 0.12, 0.14,
        ),
    },
    {
        "id": "phthalo-blue-rs",
        "name": "Phthalo Blue (Red Shade)",
        "brand": "Daniel Smith",
        "pigment_code": "PB15:1",
        "medium": "watercolor",
        "hex": "#101840",
        "opacity": 0.95,
        "ratios": (
            2.8, 2.5, 2.0, 1.5, 0.95, 0.58, 0.32, 0.19,
            0.13, 0.11, 0.13, 0.23, 0.42, 0.65, 0.81, 0.87,
            0.83, 0.70, 0.53, 0.36, 0.23, 0.15, 0.10, 0.08,
            0.08, 0.08, 0.09, 0.10, 0.12, 0.14, 0.16,
        ),
    },
    {
        "id": "ultramarine-blue",
        "name": "Ultramarine Blue",
        "brand": "Winsor & Newton",
        "pigment_code": "PB29",
        "medium": "oil",
        "hex": "#203860",
        "opacity": 0.85,
        "ratios": (
            3.8, 3.5, 3.0, 2.3, 1.6, 1.0, 0.58, 0.32,
            0.18, 0.12, 0.10, 0.12, 0.20, 0.36, 0.56, 0.72,
            0.80, 0.78, 0.65, 0.48, 0.32, 0.20, 0.13, 0.09,
            0.08, 0.08, 0.09, 0.10, 0.12, 0.15, 0.18,
        ),
    },
    {
        "id": "cerulean-blue",
        "name": "Cerulean Blue",
        "brand": "Daniel Smith",
        "pigment_code": "PB35",
        "medium": "watercolor",
        "hex": "#407898",
        "opacity": 0.7,
        "ratios": (
            6.0, 5.5, 4.8, 3.8, 2.6, 1.6, 0.88, 0.46,
            0.24, 0.14, 0.10, 0.10, 0.14, 0.26, 0.44, 0.62,
            0.73, 0.74, 0.65, 0.50, 0.36, 0.24, 0.16, 0.12,
            0.10, 0.10, 0.11, 0.12, 0.14, 0.16, 0.18,
        ),
    },
    {
        "id": "prussian-blue",
        "name": "Prussian Blue",
        "brand": "Winsor & Newton",
        "pigment_code": "PB27",
        "medium": "oil",
        "hex": "#102830",
        "opacity": 0.95,
        "ratios": (
            4.2, 3.8, 3.2, 2.4, 1.6, 0.95, 0.52, 0.27,
            0.14, 0.09, 0.08, 0.11, 0.22, 0.42, 0.64, 0.78,
            0.78, 0.65, 0.47, 0.30, 0.18, 0.12, 0.09, 0.08,
            0.08, 0.10, 0.12, 0.15, 0.18, 0.21, 0.24,
        ),
    },
    {
        "id": "indigo",
        "name": "Indigo",
        "brand": "Daniel Smith",
        "pigment_code": "PB60",
        "medium": "watercolor",
        "hex": "#181830",
        "opacity": 0.9,
        "ratios": (
            3.2, 3.0, 2.6, 2.0, 1.4, 0.85, 0.48, 0.26,
            0.14, 0.09, 0.08, 0.10, 0.17, 0.32, 0.52, 0.68,
            0.74, 0.70, 0.56, 0.40, 0.26, 0.17, 0.12, 0.09,
            0.09, 0.10, 0.12, 0.14, 0.17, 0.20, 0.23,
        ),
    },
    {
        "id": "cobalt-blue",
        "name": "Cobalt Blue",
        "brand": "Golden",
        "pigment_code": "PB28",
        "medium": "acrylic",
        "hex": "#285888",
        "opacity": 0.75,
        "ratios": (
            5.5, 5.0, 4.3, 3.3, 2.2, 1.3, 0.72, 0.38,
            0.21, 0.14, 0.12, 0.15, 0.26, 0.45, 0.64, 0.76,
            0.78, 0.70, 0.54, 0.38, 0.25, 0.17, 0.12, 0.10,
            0.10, 0.11, 0.13, 0.15, 0.17, 0.20, 0.23,
        ),
    },
    # Greens
    {
        "id": "phthalo-green-bs",
        "name": "Phthalo Green (Blue Shade)",
        "brand": "Golden",
        "pigment_code": "PG7",
        "medium": "acrylic",
        "hex": "#083820",
        "opacity": 0.98,
        "ratios": (
            3.0, 2.7, 2.3, 1.7, 1.1, 0.62, 0.32, 0.16,
            0.10, 0.08, 0.10, 0.18, 0.35, 0.58, 0.76, 0.82,
            0.76, 0.58, 0.38, 0.22, 0.13, 0.09, 0.08, 0.08,
            0.09, 0.11, 0.13, 0.16, 0.19, 0.22, 0.25,
        ),
    },
    {
        "id": "sap-green",
        "name": "Sap Green",
        "brand": "Winsor & Newton",
        "pigment_code": "PY110+PG36",
        "medium": "oil",
        "hex": "#385820",
        "opacity": 0.8,
        "ratios": (
            5.5, 5.0, 4.3, 3.3, 2.2, 1.3, 0.68, 0.32,
            0.14, 0.08, 0.07, 0.10, 0.20, 0.38, 0.58, 0.70,
            0.68, 0.52, 0.34, 0.20, 0.13, 0.09, 0.08, 0.09,
            0.11, 0.14, 0.17, 0.21, 0.25, 0.29, 0.32,
        ),
    },
    {
        "id": "viridian",
        "name": "Viridian",
        "brand": "Daniel Smith",
        "pigment_code": "PG18",
        "medium": "watercolor",
        "hex": "#204838",
        "opacity": 0.65,
        "ratios": (
            4.5, 4.2, 3.6, 2.8, 1.9, 1.1, 0.58, 0.28,
            0.14, 0.09, 0.08, 0.12, 0.24, 0.46, 0.66, 0.78,
            0.76, 0.60, 0.40, 0.24, 0.15, 0.11, 0.10, 0.10,
            0.12, 0.14, 0.17, 0.20, 0.23, 0.26, 0.29,
        ),
    },
    {
        "id": "chromium-oxide-green",
        "name": "Chromium Oxide Green",
        "brand": "Golden",
        "pigment_code": "PG17",
        "medium": "acrylic",
        "hex": "#506038",
        "opacity": 0.9,
        "ratios": (
            5.0, 4.7, 4.2, 3.4, 2.4, 1.5, 0.82, 0.42,
            0.22, 0.14, 0.11, 0.13, 0.22, 0.38, 0.55, 0.64,
            0.62, 0.50, 0.36, 0.25, 0.18, 0.14, 0.13, 0.13,
            0.14, 0.16, 0.18, 0.21, 0.24, 0.27, 0.30,
        ),
    },
    {
        "id": "terre-verte",
        "name": "Terre Verte",
        "brand": "Winsor & Newton",
        "pigment_code": "PG23",
        "medium": "oil",
        "hex": "#607860",
        "opacity": 0.6,
        "ratios": (
            3.8, 3.5, 3.1, 2.5, 1.8, 1.1, 0.62, 0.34,
            0.20, 0.14, 0.12, 0.14, 0.22, 0.34, 0.46, 0.53,
            0.52, 0.44, 0.34, 0.26, 0.21, 0.18, 0.17, 0.17,
            0.18, 0.20, 0.22, 0.24, 0.27, 0.29, 0.32,
        ),
    },
)
