#!/usr/bin/env python3
"""
CLI entry point for the fitness e2e suite.
"""

import asyncio
import sys
from pathlib import Path


def main():
    """
    Menu for the manual chores around the suite: checking the Appium setup and
    finding locators in captured page sources.
    """
    print("=" * 60)
    print("XQ Fitness E2E CLI (Appium / XCUITest)")
    print("=" * 60)
    print("\nOptions:")
    print("1. Mobile smoke test (screenshot + page source)")
    print("2. Search a captured page source (locator discovery)")
    print("3. Summarise a directory of DOM captures")
    print("4. Exit")

    choice = input("\nEnter your choice (1-4): ").strip()

    if choice == "1":
        from fitness_automation.session import run_smoke_capture
        from fitness_automation.settings import SuiteSettings

        settings = SuiteSettings.from_env()
        pause = input("Pause before capture to let you navigate? [y/N]: ").strip().lower() in {"y", "yes"}

        result = asyncio.run(run_smoke_capture(settings, wait_for_enter_before_capture=pause))
        print("\n✓ Mobile smoke test completed")
        print(f"  Session: {result.session_id}")
        print(f"  Screenshot: {result.screenshot_path}")
        print(f"  Page source: {result.page_source_path}")
    elif choice == "2":
        from fitness_automation.mobile.dom_tree import search_elements, suggest_locator

        default_xml_path = "artifacts/dom-captures/page-source.xml"
        xml_path = input(f"Page source XML path [{default_xml_path}]: ").strip() or default_xml_path
        query = input("Search query (e.g. 'routine', 'submit', 'sets-input'): ").strip()

        if not query:
            print("Query is required.")
            return

        try:
            xml = Path(xml_path).read_text(encoding="utf-8")
        except FileNotFoundError:
            print(f"Page source file not found: {xml_path}")
            return

        try:
            matches = search_elements(xml, query=query, limit=30)
        except ValueError as e:
            print(f"Could not search page source: {e}")
            return
        if not matches:
            print("No matches found.")
            return

        print(f"\nFound {len(matches)} match(es):")
        for i, m in enumerate(matches, 1):
            locator = suggest_locator(m)
            print(f"{i:>2}. {locator or '(no suggestion)'} | {m.type}")
            if m.label:
                print(f"    label: {m.label}")
            if m.value:
                print(f"    value: {m.value}")
    elif choice == "3":
        from fitness_automation.mobile.dom_tree import analyze_dom_directory, format_report

        default_dir = "artifacts/dom-captures"
        directory = input(f"DOM capture directory [{default_dir}]: ").strip() or default_dir
        try:
            screens = analyze_dom_directory(Path(directory))
        except (FileNotFoundError, ValueError) as e:
            print(str(e))
            return
        if not screens:
            print(f"No XML captures in {directory}")
            return
        print(format_report(screens))
    elif choice == "4":
        print("Exiting...")
        sys.exit(0)
    else:
        print("Invalid choice. Please choose 1-4.")


if __name__ == "__main__":
    main()
