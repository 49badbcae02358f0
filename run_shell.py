#!/usr/bin/env python3
"""
Story agent demo shell startup script
"""
import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))


def main():
    """Main entry point for the shell"""
    # Import after path setup
    from storyshell.cli import cli

    cli()


if __name__ == "__main__":
    main()
