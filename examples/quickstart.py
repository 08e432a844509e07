"""Quickstart example for ftldatetime.

This example demonstrates locale-aware DATETIME() formatting in Fluent messages.

WARNING: Examples use use_isolating=False for cleaner terminal output.
NEVER disable bidi isolation in production applications that support RTL languages.
Always use the default use_isolating=True for production code.

Note: Examples ignore the 'errors' return value where nothing can go wrong.
In production, always check errors and log/report translation issues.
"""

from datetime import datetime

from ftldatetime import DateStyle, FluentBundle, FluentDateTime, HourCycle

FALL_OF_THE_WALL = datetime(1989, 11, 9, 23, 30)

FTL = """
# Styles chosen by the translator
default = { DATETIME($date) }
long-date = { DATETIME($date, dateStyle: "long") }
full-date-short-time = { DATETIME($date, dateStyle: "full", timeStyle: "short") }
evening = The wall opened at { DATETIME($date, timeStyle: "short") }.

# Developer presets on the value, no options in the pattern
preset = { DATETIME($date) }
"""

# Example 1: Styles in FTL
print("=" * 50)
print("Example 1: dateStyle and timeStyle")
print("=" * 50)

bundle = FluentBundle("en-US", use_isolating=False)
bundle.add_datetime_support()
bundle.add_resource(FTL)

for message_id in ("default", "long-date", "full-date-short-time", "evening"):
    result, _ = bundle.format_pattern(message_id, {"date": FALL_OF_THE_WALL})
    print(f"{message_id}: {result}")
# Output:
# default: 11/9/89
# long-date: November 9, 1989
# full-date-short-time: Thursday, November 9, 1989, 11:30 PM
# evening: The wall opened at 11:30 PM.

# Example 2: Options stored on the value
print("\n" + "=" * 50)
print("Example 2: FluentDateTime presets")
print("=" * 50)

value = FluentDateTime(FALL_OF_THE_WALL)
value.options.set_date_style(DateStyle.FULL)

result, _ = bundle.format_pattern("preset", {"date": value})
print(result)
# Output: Thursday, November 9, 1989

# Call-site options still win over the preset
result, _ = bundle.format_pattern("long-date", {"date": value})
print(result)
# Output: November 9, 1989

# Example 3: Same value, other locales
print("\n" + "=" * 50)
print("Example 3: Locales")
print("=" * 50)

value = FluentDateTime(FALL_OF_THE_WALL)
value.options.set_hour_cycle(HourCycle.H23)

for locale in ("en-US", "de-DE", "fr-FR"):
    localized = FluentBundle(locale, use_isolating=False)
    localized.add_datetime_support()
    localized.add_resource(FTL)
    result, _ = localized.format_pattern("full-date-short-time", {"date": value})
    print(f"{locale}: {result}")

# Example 4: Invalid options degrade gracefully
print("\n" + "=" * 50)
print("Example 4: Error Reporting")
print("=" * 50)

bundle.add_resource('typo = { DATETIME($date, dateStyle: "enormous", era: "long") }')
result, errors = bundle.format_pattern("typo", {"date": FALL_OF_THE_WALL})
print(result)
# Output: 11/9/89
for error in errors:
    print(f"  {type(error).__name__}: {error.diagnostic.message if error.diagnostic else error}")
# Output:   FluentOptionError: Ignored invalid option(s) in DATETIME(): dateStyle, era

print("\n" + "=" * 50)
print("All examples completed successfully!")
print("=" * 50)
