"""Object-oriented take on the CSV text workload."""

import csv
from pathlib import Path

DATA_FILE = Path(__file__).with_name("dados.csv")
OUTPUT_FILE = Path("dados_novo.csv")


class CSVHandler:
    def __init__(self, path):
        self.records = self.read(path)

    def read(self, path):
        with open(path, newline="", encoding="utf-8") as f:
            return [
                {"id": int(row["id"]), "texto": row["texto"].strip()}
                for row in csv.DictReader(f)
                if row.get("id")
            ]

    def show_texts(self):
        for record in self.records:
            print(f"{record['id']}: {record['texto']}")

    def filter_by_word(self, word):
        word = word.lower()
        return [record for record in self.records if word in record["texto"].lower()]

    def count_rows(self):
        return len(self.records)

    def sort_by_id(self):
        self.records.sort(key=lambda record: record["id"])

    def sort_by_text(self):
        self.records.sort(key=lambda record: record["texto"])

    def add_row(self, row_id, text):
        self.records.append({"id": row_id, "texto": text})

    def remove_by_id(self, row_id):
        self.records = [record for record in self.records if record["id"] != row_id]

    def count_words(self):
        return sum(len(record["texto"].split(" ")) for record in self.records)

    def save(self, path):
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=["id", "texto"])
            writer.writeheader()
            writer.writerows(self.records)


handler = CSVHandler(DATA_FILE)

print("=== POO ===")
handler.show_texts()
print("Filtering by 'JavaScript':", handler.filter_by_word("JavaScript"))
print("Total rows:", handler.count_rows())
handler.sort_by_text()
print("After sorting by text:")
handler.show_texts()
handler.add_row(6, "Aprender exige prática")
handler.show_texts()
handler.remove_by_id(2)
print("After removing id 2:")
handler.show_texts()
print("Total words:", handler.count_words())
handler.save(OUTPUT_FILE)
