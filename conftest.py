import os
import random

import pytest
from faker import Faker

from folder_cabinet.folder import Folder, FolderSample, MultiFolderSample

FOLDER_NAMES = ["abc", "bca", "cab", "docs", "archive"]
FOLDER_SIZES = ["SMALL", "MEDIUM", "LARGE", "HUGE"]


@pytest.fixture(scope="session")
def folder_seed():
    """Seed for randomized folder structures.

    The seed can be set via FACTORY_SEED environment variable, or will be
    randomly generated. The seed is printed to stdout for reproducibility.
    """
    seed = os.environ.get("FACTORY_SEED")
    if seed:
        seed = int(seed)
    else:
        seed = random.randint(0, 2**32 - 1)

    print(f"\n{'=' * 70}")
    print(f"Factory seed: {seed}")
    print(f"To reproduce this test run, set: FACTORY_SEED={seed}")
    print(f"{'=' * 70}\n")

    return seed


@pytest.fixture
def fake(folder_seed):
    faker = Faker()
    faker.seed_instance(folder_seed)
    return faker


def build_random_folders(
    fake: Faker, max_depth: int = 4, max_children: int = 4
) -> list[Folder]:
    """Build a random acyclic structure with repeated names and sizes."""
    folders: list[Folder] = []
    for _ in range(fake.random_int(0, max_children)):
        name = fake.random_element(FOLDER_NAMES)
        size = fake.random_element(FOLDER_SIZES)
        if max_depth > 0 and fake.boolean(chance_of_getting_true=40):
            children = build_random_folders(fake, max_depth - 1, max_children)
            folders.append(MultiFolderSample(name, size, children))
        else:
            folders.append(FolderSample(name, size))
    return folders


@pytest.fixture
def random_structures(fake):
    """A batch of random folder structures, including some empty ones."""
    return [build_random_folders(fake) for _ in range(50)]


@pytest.fixture
def sample_folders():
    plain_abc = FolderSample("abc", "SMALL")
    plain_bca = FolderSample("bca", "MEDIUM")
    plain_cab = FolderSample("cab", "LARGE")
    nested_bca = FolderSample("bca", "MEDIUM")
    multi_abc = MultiFolderSample("abc", "LARGE", [nested_bca])
    return [plain_abc, plain_bca, plain_cab, multi_abc]
