"""
Reset the flashcard store.

DANGEROUS: This deletes every category, card, rating count and the streak!

Usage:
    python -m scripts.maintenance.reset_store [--yes]
"""

import argparse

from core import config, storage


def main():
    parser = argparse.ArgumentParser(description="Delete all stored flashcard data")
    parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")
    args = parser.parse_args()
    config.configure_logging()

    print("=" * 60)
    print("WARNING: Reset Flashcard Store")
    print("=" * 60)
    print()
    print(f"Database: {config.get_database_url()}")
    print("This will DELETE:")
    print("  - All categories and their cards")
    print("  - All rating counts")
    print("  - The study streak and preferences")
    print()

    if not args.yes:
        response = input("Are you sure you want to reset? (type 'yes' to confirm): ")
        if response.lower() != "yes":
            print("\nCancelled. No changes made.")
            return

    print("\nResetting store...")
    storage.reset_db()
    print("✓ Store reset complete!")


if __name__ == "__main__":
    main()
