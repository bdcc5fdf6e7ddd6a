"""
Built-in sample dataset.

Used whenever the configured dataset cannot be fetched or parsed, so the atlas
always starts with at least one entry on the map.
"""
from __future__ import annotations

from typing import Any, Dict, List

SAMPLE_ENTRIES: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Abu al-Walid Muhammad ibn Ahmad ibn Rushd (Averroes)",
        "region": "espana",
        "regionName": "España (Mundo islámico / Al-Ándalus)",
        "subcategory": "Edad Media (Edad de Oro del Islam, c. Siglos X-XII)",
        "era": "1126 - 1198",
        "area": "Filosofía y teología islámica, aristotelismo",
        "concepts": "Relación entre fe y razón, la eternidad del mundo, el intelecto agente",
        "works": [
            "Comentarios a Aristóteles (De anima, Metaphysica, etc.)",
            "La destrucción de la destrucción (Tahafut al-Tahafut)",
            "Discurso decisivo (Faṣl al-Maqāl)",
        ],
        "location": [37.8882, -4.7794],
        "city": "Nacido en Córdoba (Califato Omeya de Córdoba)",
        "color": "#3498db",
    },
    {
        "id": 2,
        "name": "Domingo de Soto",
        "region": "espana",
        "regionName": "España",
        "subcategory": "Escolástica Renacentista (Siglo XVI)",
        "era": "1494 - 1560",
        "area": "Filosofía natural, lógica y derecho (Escuela de Salamanca)",
        "concepts": "Movimiento de caída libre (dinámica pre-galileana), teoría de la guerra justa, ius gentium",
        "works": [
            "Deliberación sobre la causa de los pobres (1545)",
            "Comentario a la Física de Aristóteles (1545)",
            "De iustitia et iure (1553)",
        ],
        "location": [40.9429, -4.1088],
        "city": "Segovia",
        "color": "#3498db",
    },
]


def sample_payload() -> Dict[str, Any]:
    """Return a fresh copy of the sample data in the documented payload shape."""
    return {"entries": [dict(item) for item in SAMPLE_ENTRIES]}
