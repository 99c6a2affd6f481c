from postplanner.database import SessionLocal, init_db
from postplanner.seed import load_sample_data

# Create tables
init_db()

db = SessionLocal()

try:
    counts = load_sample_data(db)
finally:
    db.close()

print("Database seeded successfully!")
for table, count in counts.items():
    print(f"  - {count} {table}")
