# polykernels

A collection of small, well-defined numerical kernels for benchmarking:
data-mining statistics (correlation, covariance), BLAS-style routines
(gemm, gemver, gesummv, symm, syr2k, syrk, trmm), matrix–vector kernels
(atax, bicg, mvt) and linear solvers (cholesky, durbin, gramschmidt, lu,
ludcmp, trisolv).

Every kernel comes with:

- an `init_*` function that builds deterministic input data for given
  dimensions,
- a `kernel_*` function that performs the computation and returns its results
  as NumPy arrays,
- a `dump_*` function that renders the live-out arrays as text, returned as a
  dict from array name to text, so results can be compared between runs or
  implementations,
- a `run_*` function that does all three for one of the standard dataset sizes.

## Installation

```
pip install .
```

The only runtime dependency is NumPy.

## Dataset sizes

Problem sizes come in five standard presets, described by
`polykernels.dataset.DatasetSize`: `MINI`, `SMALL`, `MEDIUM`, `LARGE` and
`EXTRALARGE`. Each benchmark has its own dimensions for each preset; the
`run_*` functions default to `LARGE`. A size can be given by name,
case-insensitively and with an optional `_DATASET` suffix:

```python
from polykernels.dataset import DatasetSize

size = DatasetSize.parse("mini")          # DatasetSize.MINI
size = DatasetSize.parse("SMALL_DATASET") # DatasetSize.SMALL
```

An unknown name raises `ValueError`. The `run_*` functions accept either a
`DatasetSize` member or such a name.

## Using the library

Run a whole benchmark at a preset size:

```python
from polykernels.blas_general import run_gemm

output = run_gemm("small")
print(output["C"])
```

Or call the pieces of a single kernel directly, for instance to feed it your
own sizes:

```python
from polykernels.datamining import init_covariance, kernel_covariance, dump_covariance

float_n, data = init_covariance(28, 32)
cov = kernel_covariance(float_n, data)
print(dump_covariance(cov)["cov"])
```

Kernels return new arrays rather than modifying their arguments.

The modules group the kernels by family:

| module | kernels |
| --- | --- |
| `polykernels.datamining` | correlation, covariance |
| `polykernels.blas_general` | gemm, gemver, gesummv |
| `polykernels.blas_symmetric` | symm, syr2k, syrk, trmm |
| `polykernels.matvec` | atax, bicg, mvt |
| `polykernels.factorizations` | cholesky, lu, ludcmp |
| `polykernels.orthogonal` | gramschmidt |
| `polykernels.triangular` | durbin, trisolv |

## Dump format

`polykernels.dataset.format_entries` turns `(position, value)` pairs into
text: each value is written with two decimals followed by a space, and a line
break is inserted before every position that is a multiple of 20. The
`dump_*` functions use it for their arrays (the trisolv dump places the line
break after the entry instead).

## What this package does not do

- It has no command-line program; benchmarks are run by calling the `run_*`
  functions from Python.
- There is no lookup of benchmarks by name; import the function you need from
  its module.
- It does not time the kernels. Wrap the `kernel_*` calls with a timer of your
  choice (for example `time.perf_counter`) if you need measurements.

## Running the tests

```
pip install ".[test]"
pytest
```