"""Structured (procedural) take on the CSV text workload."""

import csv
from pathlib import Path

DATA_FILE = Path(__file__).with_name("dados.csv")


def read_rows(path):
    with open(path, newline="", encoding="utf-8") as f:
        return [row for row in csv.DictReader(f) if row.get("id")]


def to_records(rows):
    return [{"id": int(row["id"]), "texto": row["texto"].strip()} for row in rows]


def show_texts(records):
    for record in records:
        print(f"{record['id']}: {record['texto']}")


def filter_by_word(records, word):
    word = word.lower()
    return [record for record in records if word in record["texto"].lower()]


def count_rows(records):
    return len(records)


def sort_by_id(records):
    return sorted(records, key=lambda record: record["id"])


def sort_by_text(records):
    return sorted(records, key=lambda record: record["texto"])


def add_row(records, row_id, text):
    records.append({"id": row_id, "texto": text})


def remove_by_id(records, row_id):
    return [record for record in records if record["id"] != row_id]


def count_words(records):
    return sum(len(record["texto"].split(" ")) for record in records)


records = to_records(read_rows(DATA_FILE))
show_texts(records)

print("Filtering by 'JavaScript':", filter_by_word(records, "JavaScript"))
print("Total rows:", count_rows(records))
print("Sorted by id:", sort_by_id(records))
print("Sorted by text:", sort_by_text(records))

add_row(records, 6, "Aprender exige prática")
print("After adding a row:")
show_texts(records)

records = remove_by_id(records, 2)
print("After removing id 2:")
show_texts(records)

print("=== Estruturado ===")
print("Total words:", count_words(records))
