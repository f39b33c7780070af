#!/usr/bin/env python3
"""
View Program Script
Fetches a generated workout program from the database, renders it and
writes it to a markdown file.
"""
import sys
sys.path.insert(0, 'src')

import argparse
from uuid import UUID

from api.services.markdown_generator import generate_program_markdown
from api.services.program_renderer import render_program
from db.database import SessionLocal
from db.program_utils import get_program


def main():
    parser = argparse.ArgumentParser(description='View a workout program in markdown format')
    parser.add_argument('program_id', type=UUID, help='Program ID to fetch')
    parser.add_argument('-o', '--output', type=str, help='Output markdown file (default: program_<id>.md)')

    args = parser.parse_args()

    db = SessionLocal()

    try:
        print(f"Fetching program {args.program_id}...")
        program = get_program(db, args.program_id)

        if not program:
            print(f"❌ Program {args.program_id} not found")
            sys.exit(1)

        print(f"✅ Found program: {program.program_name}")

        view = render_program(program.program_structure)
        print(f"   Rendered as {view.kind} view")

        markdown = generate_program_markdown(
            view,
            program_name=program.program_name,
            client_name=program.client.name if program.client else None,
            duration_weeks=program.duration_weeks,
            split_type=program.split_type,
            created_at=program.created_at
        )

        # Write to file
        output_file = args.output or f"program_{args.program_id}.md"
        with open(output_file, 'w', encoding='utf-8') as f:
            f.write(markdown)

        print(f"✅ Program saved to: {output_file}")
        print(f"\nPreview:")
        print("=" * 80)
        # Print first 30 lines as preview
        lines = markdown.split('\n')
        for line in lines[:30]:
            print(line)
        if len(lines) > 30:
            print(f"\n... ({len(lines) - 30} more lines)")
        print("=" * 80)

    finally:
        db.close()


if __name__ == "__main__":
    main()
