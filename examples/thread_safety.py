"""Thread Safety Example - Sharing one CatalogHandle across threads.

Thread Safety:
    A loaded CatalogStore is immutable, so lookups never lock. Reload builds
    a complete new store first and then swaps the handle's reference, so a
    lookup sees either the old catalog or the new one, never a mixture.

Demonstrates:
1. Load once at startup, then read from many threads
2. ThreadPoolExecutor with a shared handle
3. Hot reload while readers are running

Python 3.13+.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed

from tscatalog import CatalogHandle, load

CATALOG = """\
<?xml version="1.0" encoding="utf-8"?>
<TS version="2.0" language="it">
<context>
    <name>BitcoinGUI</name>
    <message numerus="yes">
        <source>%n second(s) ago</source>
        <translation>
            <numerusform>%n secondo fa</numerusform>
            <numerusform>%n secondi fa</numerusform>
        </translation>
    </message>
    <message>
        <source>Up to date</source>
        <translation>{up_to_date}</translation>
    </message>
</context>
</TS>
"""


# Example 1: Single-threaded load (RECOMMENDED)
def example_1_recommended_pattern() -> None:
    """Example 1: Load during startup, then share the handle for reads."""
    print("=" * 60)
    print("Example 1: Recommended Pattern - Load Once, Read Everywhere")
    print("=" * 60)

    handle = load(CATALOG.format(up_to_date="Aggiornato"))
    print("[STARTUP] Catalog loaded (single-threaded)")

    def worker(thread_id: int, handle_ref: CatalogHandle) -> None:
        """Worker function that reads from the shared handle."""
        for count in range(1, 4):
            text = handle_ref.tr("BitcoinGUI", "%n second(s) ago", count=count * thread_id + 1)
            print(f"  [Thread-{thread_id}] {text}")
            time.sleep(0.01)  # Simulate work

    print("\n[CONCURRENT READS] Multiple threads reading from shared handle:")

    threads = []
    for tid in range(3):
        t = threading.Thread(target=worker, args=(tid, handle))
        threads.append(t)
        t.start()

    for t in threads:
        t.join()

    print("\n[SUCCESS] All threads completed safely")


# Example 2: ThreadPoolExecutor with shared handle
def example_2_threadpool_pattern() -> None:
    """Example 2: Render status lines for many jobs in a pool."""
    print("\n" + "=" * 60)
    print("Example 2: ThreadPoolExecutor Pattern")
    print("=" * 60)

    handle = load(CATALOG.format(up_to_date="Aggiornato"))

    def render_age(seconds: int) -> str:
        return handle.tr("BitcoinGUI", "%n second(s) ago", count=seconds)

    with ThreadPoolExecutor(max_workers=4) as executor:
        futures = {executor.submit(render_age, seconds): seconds for seconds in (1, 2, 30, 61)}
        for future in as_completed(futures):
            print(f"  [{futures[future]:>3}s] {future.result()}")

    print("\n[SUCCESS] Pool pattern complete")


# Example 3: Hot reload
def example_3_hot_reload() -> None:
    """Example 3: Swap in an updated catalog while readers are running."""
    print("\n" + "=" * 60)
    print("Example 3: Hot Reload")
    print("=" * 60)

    handle = load(CATALOG.format(up_to_date="Aggiornato"))
    stop = threading.Event()
    seen: set[str] = set()

    def reader() -> None:
        while not stop.is_set():
            seen.add(handle.tr("BitcoinGUI", "Up to date"))

    threads = [threading.Thread(target=reader) for _ in range(4)]
    for t in threads:
        t.start()

    for revision in ("Sincronizzato", "Aggiornato", "Sincronizzato"):
        handle.reload(CATALOG.format(up_to_date=revision))
        time.sleep(0.01)

    stop.set()
    for t in threads:
        t.join()

    print(f"  Readers observed: {sorted(seen)}")
    print(f"  Current text: {handle.tr('BitcoinGUI', 'Up to date')}")
    print("\n[SUCCESS] Every lookup saw a complete catalog")


if __name__ == "__main__":
    example_1_recommended_pattern()
    example_2_threadpool_pattern()
    example_3_hot_reload()

    print("\n" + "=" * 60)
    print("[SUCCESS] All thread safety examples complete!")
    print("=" * 60)
