from pathlib import Path

from pqueue.bench.dataset import DEFAULT_SEED, generate_random_dataset

# --- Paths ---
BASE_DATA_DIR = Path("data")
TEST_DIR = BASE_DATA_DIR / "test"

# --- Generation settings ---
DATASET_SIZES = (100, 1_000)
NUM_INSTANCES = 5


def main():
    TEST_DIR.mkdir(parents=True, exist_ok=True)
    print(f"📂 Generating datasets in: {TEST_DIR.resolve()}\n")

    for size in DATASET_SIZES:
        for i in range(NUM_INSTANCES):
            # Naming pattern: neighbors_{size}_{index}
            d_id = f"neighbors_{size}_{i:03d}"

            # One seed per instance; the first one matches the reference seed
            dataset = generate_random_dataset(d_id, size=size, seed=DEFAULT_SEED + i)

            file_path = TEST_DIR / f"{d_id}.json"
            dataset.save(file_path)
            print(f"✅ [{d_id}] Saved -> {file_path.name}")

    print(f"\n🎉 Generated {len(DATASET_SIZES) * NUM_INSTANCES} datasets.")


if __name__ == "__main__":
    main()
