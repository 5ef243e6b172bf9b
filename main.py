# main.py
# Point d'entrée CLI : feuille Excel → activités → POST JSON.

import argparse
import json
import logging
import sys

from core.config import config
from core.errors import PadelCoachError, WorkbookNotFoundError
from core.utils.logger import log_error, log_info, log_warning, set_level
from models.section import GROUP_NAMES
from scenarios.publisher import publish_section, summarize
from scenarios.section_loader import load_section
from services.activity_sender import ActivitySender


def parse_arguments(argv=None):
    """
    Parse les arguments CLI.
    Exemple :
      python main.py --file programming-table-2.xlsx --sheet "1. DERECHA PLANA" --group exercise_1
    """
    parser = argparse.ArgumentParser(description="PadelCoach CLI - publication des activités")
    parser.add_argument("--file", default=config.workbook_path, help="Classeur Excel (.xlsx)")
    parser.add_argument("--sheet", default=config.sheet_name, help="Nom de la feuille")
    parser.add_argument("--endpoint", default=config.endpoint, help="URL de l'API de réception")
    parser.add_argument(
        "--group",
        action="append",
        choices=GROUP_NAMES,
        help="Groupe à envoyer (répétable, défaut : tous)",
    )
    parser.add_argument("--delay", type=float, default=config.send_delay,
                        help="Pause entre deux envois (secondes)")
    parser.add_argument("--dry-run", action="store_true",
                        help="Affiche les JSON sans rien envoyer")
    parser.add_argument("--debug", action="store_true", default=config.debug)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_arguments(argv)
    if args.debug:
        set_level(logging.DEBUG)

    # 1. Charger la feuille
    try:
        section = load_section(args.file, args.sheet)
    except WorkbookNotFoundError as e:
        log_error(f"Fichier non trouvé : {e.path}", module="CLI")
        return 1
    except PadelCoachError as e:
        log_error(f"{e.error_code} → {e.message}", module="CLI")
        return 1

    groups = args.group or list(GROUP_NAMES)

    print("\n=== PadelCoach - Section ===")
    for name, activities in section.groups():
        print(f"{name:<11}: {len(activities)} activités")
    print("============================\n")

    # 2. Mode simulation : JSON uniquement
    if args.dry_run:
        for name in groups:
            for activity in section.group(name):
                print(json.dumps(activity.to_payload(), ensure_ascii=False))
        return 0

    # 3. Envoi
    try:
        sender = ActivitySender(args.endpoint, timeout=config.http_timeout)
    except PadelCoachError as e:
        log_error(e.message, module="CLI")
        return 1

    results = publish_section(section, sender, groups=groups, delay=args.delay)
    summary = summarize(results)
    log_info(
        f"Envoi terminé : {summary['sent']}/{summary['total']} OK, {summary['failed']} en échec",
        module="CLI",
    )
    if summary["failed"]:
        failed_ids = [r.data.get("id") for r in results if not r.success]
        log_warning(f"Activités non envoyées : {', '.join(failed_ids)}", module="CLI")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
