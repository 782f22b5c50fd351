from benchmarks.throughput import bench


def main():
    buf, raw = bench(10000)
    print(f"buffered: {buf:.6f}s")
    print(f"unbuffered: {raw:.6f}s")


if __name__ == "__main__":
    main()
