"""Example with producer and worker threads sharing a LockedDeque of print jobs."""

import random
import threading
import time

from linkeddeque import EmptyDequeError, LockedDeque


def worker(jobs: LockedDeque[dict], worker_id: str, fail_rate: float = 0.2) -> None:
    """
    Worker that takes jobs from the head and requeues failures at the head.

    Args:
        jobs: Shared job deque
        worker_id: Identifier for this worker
        fail_rate: Probability of simulated failure (0.0 to 1.0)
    """
    processed = 0

    while True:
        try:
            job = jobs.remove_first()
        except EmptyDequeError:
            break

        print(f"[{worker_id}] Printing {job['document']}...")
        time.sleep(random.uniform(0.01, 0.05))

        if random.random() < fail_rate and job["attempts"] < 3:
            job["attempts"] += 1
            print(f"[{worker_id}] ✗ Failed {job['document']} - will retry")
            jobs.add_first(job)
        else:
            print(f"[{worker_id}] ✓ Printed {job['document']}")
            processed += 1

    print(f"[{worker_id}] Finished - printed {processed} documents")


def main() -> None:
    """Queue documents, then run several workers against the shared deque."""
    print("=== Threaded Workers Example ===\n")

    jobs = LockedDeque[dict]()
    for i in range(10):
        jobs.add_last({"document": f"doc-{i:02d}.pdf", "attempts": 0})
    # Urgent job goes to the head
    jobs.add_first({"document": "urgent.pdf", "attempts": 0})

    print(f"Queued: {jobs.size()} documents\n")

    threads = [
        threading.Thread(target=worker, args=(jobs, name, rate))
        for name, rate in (("Worker-A", 0.3), ("Worker-B", 0.2), ("Worker-C", 0.1))
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    print(f"\nRemaining: {jobs.size()}")


if __name__ == "__main__":
    main()
