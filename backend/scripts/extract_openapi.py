#!/usr/bin/env python3
"""
Extraction du schéma OpenAPI
Écrit le schéma de l'application FastAPI Gbairai au format JSON.

Usage:
    # depuis la racine du projet (paquet installé avec pip install -e .)
    python backend/scripts/extract_openapi.py

    # vers un fichier
    python backend/scripts/extract_openapi.py --output backend/openapi.json
"""
import argparse
import json
import os
import sys

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(os.path.dirname(SCRIPT_DIR))

# aucun appel au LLM: la génération du schéma lit seulement les routes
os.environ.setdefault("ENVIRONMENT", "development")

from gbairai.main import app  # noqa: E402


def extract_openapi() -> dict:
    """Schéma OpenAPI généré à partir des routes (lifespan non démarré)"""
    return app.openapi()


def main():
    parser = argparse.ArgumentParser(
        description="Extrait le schéma OpenAPI de l'API Gbairai"
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Fichier de sortie (sortie standard si absent)",
    )
    args = parser.parse_args()

    schema = extract_openapi()
    json_output = json.dumps(schema, ensure_ascii=False, indent=2)

    if args.output:
        # chemin relatif résolu depuis la racine du projet
        output_path = args.output if os.path.isabs(args.output) else os.path.join(PROJECT_ROOT, args.output)
        os.makedirs(os.path.dirname(output_path), exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(json_output)
        print(f"Schéma OpenAPI écrit dans {output_path}", file=sys.stderr)
    else:
        print(json_output)


if __name__ == "__main__":
    main()
