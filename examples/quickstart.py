"""Quickstart example for tscatalog.

Loads a small Qt Linguist catalog and resolves plain, plural and
parameterized messages, including the fallbacks for missing and unfinished
translations.

Note: Most examples use handle.tr() for brevity. In production, use
handle.resolve() where you want to log ResolvedText.errors.
"""

import logging

from tscatalog import ResolutionStatus, load, register_plural_rule
from tscatalog.diagnostics import DiagnosticFormatter

CATALOG = """\
<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE TS>
<TS version="2.0" language="it">
<context>
    <name>BitcoinGUI</name>
    <message>
        <location filename="../bitcoingui.cpp" line="+74"/>
        <source>&amp;Options...</source>
        <translation>&amp;Opzioni...</translation>
    </message>
    <message numerus="yes">
        <location line="+129"/>
        <source>%n active connection(s) to Bitcoin network</source>
        <translation>
            <numerusform>%n connessione attiva alla rete Bitcoin</numerusform>
            <numerusform>%n connessioni attive alla rete Bitcoin</numerusform>
        </translation>
    </message>
    <message>
        <location line="+68"/>
        <source>Downloaded %1 of %2 blocks of transaction history.</source>
        <translation>Scaricati %1 dei %L2 blocchi dello storico transazioni.</translation>
    </message>
    <message>
        <location line="+94"/>
        <source>Wallet is &lt;b&gt;encrypted&lt;/b&gt; and currently &lt;b&gt;unlocked&lt;/b&gt;</source>
        <translation>Il portamonete è &lt;b&gt;cifrato&lt;/b&gt; e attualmente &lt;b&gt;sbloccato&lt;/b&gt;</translation>
    </message>
    <message>
        <location filename="../bitcoin.cpp" line="+133"/>
        <source>A fatal error occurred. Bitcoin can no longer continue safely and will quit.</source>
        <translation type="unfinished"></translation>
    </message>
</context>
</TS>
"""

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# Example 1: Load and inspect
print("=" * 50)
print("Example 1: Loading a Catalog")
print("=" * 50)

handle = load(CATALOG)
print(handle)
# Output: CatalogHandle(locale='it', messages=5)
print(handle.store.statistics())
# Output: 5 translation(s) (4 finished and 1 unfinished)

# Example 2: Plain and markup-bearing messages
print("\n" + "=" * 50)
print("Example 2: Simple Messages")
print("=" * 50)

print(handle.tr("BitcoinGUI", "&Options..."))
# Output: &Opzioni...
print(handle.tr("BitcoinGUI", "Wallet is <b>encrypted</b> and currently <b>unlocked</b>"))
# Output: Il portamonete è <b>cifrato</b> e attualmente <b>sbloccato</b>

# Example 3: Plural forms
print("\n" + "=" * 50)
print("Example 3: Plural Forms")
print("=" * 50)

for count in (0, 1, 5):
    print(handle.tr("BitcoinGUI", "%n active connection(s) to Bitcoin network", count=count))
# Output:
# 0 connessioni attive alla rete Bitcoin
# 1 connessione attiva alla rete Bitcoin
# 5 connessioni attive alla rete Bitcoin

# Example 4: Positional and locale-formatted arguments
print("\n" + "=" * 50)
print("Example 4: Arguments")
print("=" * 50)

print(handle.tr("BitcoinGUI", "Downloaded %1 of %2 blocks of transaction history.", 1200, 250000))
# Output: Scaricati 1200 dei 250.000 blocchi dello storico transazioni.

# Example 5: Fallbacks never produce blank text
print("\n" + "=" * 50)
print("Example 5: Fallbacks")
print("=" * 50)

formatter = DiagnosticFormatter()
for source in (
    "A fatal error occurred. Bitcoin can no longer continue safely and will quit.",
    "Send coins",
):
    result = handle.resolve("BitcoinGUI", source)
    print(f"{result.status}: {result.text}")
    for error in result.errors:
        if error.diagnostic is not None:
            print(formatter.format(error.diagnostic))
# Output:
# fallback-unfinished: A fatal error occurred. ...
# fallback-source: Send coins

result = handle.resolve("BitcoinGUI", "Downloaded %1 of %2 blocks of transaction history.", args=(1200,))
assert result.status is ResolutionStatus.EXACT_MATCH
print(result.text, [str(e.diagnostic) for e in result.errors])
# Output: Scaricati 1200 dei %L2 blocchi ... ['Template references %L2 but only 1 argument(s) were supplied']

# Example 6: Custom plural rules
print("\n" + "=" * 50)
print("Example 6: Registering a Plural Rule")
print("=" * 50)

register_plural_rule("x-pirate", 2, lambda n: 0 if n == 1 else 1)
pirate = load(CATALOG, locale="x-pirate")
print(pirate.tr("BitcoinGUI", "%n active connection(s) to Bitcoin network", count=3))
# Output: 3 connessioni attive alla rete Bitcoin

print("\n[SUCCESS] All examples complete!")
