# polykernels

A collection of classic polyhedral benchmark kernels written with NumPy.
Each kernel builds its input arrays deterministically, runs the
computation under a wall-clock timer, and can write its live-out data to
standard error in a fixed text layout, so that results can be checked
against a reference run.

## Kernels

| Area        | Modules |
|-------------|---------|
| Data mining | `correlation` (single precision), `covariance` |
| Medley      | `floyd_warshall`, `reg_detect` (32-bit integers) |
| BLAS-like   | `atax`, `bicg`, `two_mm`, `three_mm`, `doitgen`, `gemm`, `gemver`, `gesummv`, `mvt`, `symm`, `syr2k`, `syrk`, `trmm`, `trisolv`, `cholesky` |
| Solvers     | `durbin`, `dynprog` (32-bit integers), `lu`, `ludcmp`, `gramschmidt`, `gramschmidt_variants` |

Every kernel has five dataset sizes: mini, small, standard (the default),
large and extralarge. They are the members of the `Dataset` enumeration
in `polykernels.common`; `parse_dataset` accepts names such as `"mini"`
or `"LARGE_DATASET"`. Each kernel module reports its concrete dimensions
through `sizes(dataset)`, which returns a named tuple.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Each kernel has its own command:

`polykernels-correlation`, `polykernels-covariance`,
`polykernels-floyd-warshall`, `polykernels-reg-detect`,
`polykernels-atax`, `polykernels-2mm`, `polykernels-3mm`,
`polykernels-bicg`, `polykernels-cholesky`, `polykernels-trisolv`,
`polykernels-doitgen`, `polykernels-gemm`, `polykernels-gemver`,
`polykernels-gesummv`, `polykernels-mvt`, `polykernels-symm`,
`polykernels-syr2k`, `polykernels-syrk`, `polykernels-trmm`,
`polykernels-durbin`, `polykernels-dynprog`, `polykernels-lu`,
`polykernels-ludcmp`, `polykernels-gramschmidt`,
`polykernels-gramschmidt-variants`.

All of them take the same options:

- `--dataset {mini,small,standard,large,extralarge}` chooses the problem
  size (default: standard).
- `--time` prints the kernel's running time in seconds on standard output.
- `--dump` writes the live-out arrays to standard error.

With neither `--time` nor `--dump` the kernel runs and nothing is printed.

```
polykernels-gemm --dataset mini --time --dump
```

`polykernels-gramschmidt-variants` adds two options:

- `--variant {transpose,static,workerthreads}` picks the driver (default:
  transpose). `transpose` runs the kernel on transposed copies of A and
  Q; `static` and `workerthreads` run the plain kernel, on different
  inputs, and dump their results in different layouts.
- `--compare` checks the result of the `static` or `workerthreads` driver
  against the plain kernel and fails with `ValueError` if any entry
  differs by more than 0.1.

## Library use

Every kernel module has the same shape: `sizes`, `init_array`, a
`kernel_*` function, `format_output` and `main(argv=None)`. Kernels
return new arrays and leave their inputs untouched; several return a
named tuple holding the result together with the work arrays.

```python
from polykernels import common, gemm

ni, nj, nk = gemm.sizes(common.Dataset.MINI)
alpha, beta, c, a, b = gemm.init_array(ni, nj, nk)
result = gemm.kernel_gemm(ni, nj, nk, alpha, beta, c, a, b)
print(gemm.format_output(ni, result))
```

`polykernels.common` also provides `format_values`, `build_parser`,
`emit` and `timed`, the helpers the commands are built from.

`polykernels.gramschmidt` offers `format_sections`, which prints A, Q and
R under titles one row per line, and `compare_results`, which returns
the largest difference between two matrices or raises `ValueError` at
the first entry that differs by more than 0.1.
`polykernels.gramschmidt_variants` provides
`kernel_gramschmidt_transposed`, `transpose_matrix`,
`init_array_shifted` and `format_output_by_column`.

## What this package does not do

The kernels run in a single process through NumPy. There is no choice of
thread count or scheduling, and timing is plain wall-clock time from
`time.perf_counter`: no hardware counters, cache flushing or other
instrumentation is available.