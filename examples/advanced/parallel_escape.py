"""Thread safe: escape 1000 values in parallel."""

from concurrent.futures import ThreadPoolExecutor

from escapade import Escaper

values = [f'row {i}, "quoted" & <tagged>' for i in range(1000)]
escape_csv = Escaper("csv")

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(escape_csv, values))

print(f"Escaped {len(results)} values in parallel")
print("First:", results[0])
print("Last:", results[-1])
