# Binary Radix Sort Benchmark
# Sort 100,000 random 32-bit integers in-place, recursive and iterative

from bin_radix import sort_iterative, sort_recursive

def generate_random_array(size: int, seed: int) -> list:
    # Simple LCG random number generator for reproducibility
    arr = []
    state = seed
    for _ in range(size):
        state = (state * 1103515245 + 12345) % 2147483648
        arr.append(state)
    return arr

def main():
    size = 100_000
    arr = generate_random_array(size, 42)
    arr_it = arr[:]

    sort_recursive(arr, 32)
    sort_iterative(arr_it, 32)
    assert arr == arr_it

    print(f"Sorted {size} elements")
    print(f"First 5: {arr[0]}, {arr[1]}, {arr[2]}, {arr[3]}, {arr[4]}")

if __name__ == "__main__":
    main()
