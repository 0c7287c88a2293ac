# cgraph

Small building blocks for graph-style processing pipelines.

## What it offers

### `cgraph.status`

- `CStatus` is a result object with a `code` and an `info` string.
  - `CStatus()` is OK: its code is `0` and its info is empty.
  - `CStatus("message")` is an error with code `-1`.
  - `CStatus("message", code)` sets both the message and the code.
- You can check a status with three methods:
  - `is_ok()` is true when the code is `0`.
  - `is_err()` is true when the code is negative.
  - `is_crash()` is true when the code is `-996`.
- `status += other` combines two statuses.
  - If either one is not OK, the result gets code `-1`.
  - If both are not OK, their messages are joined with `" && "`.
- `set_status(info, code=-1)` replaces the code and message.
- `reset()` sets the status back to OK.
- Statuses compare equal when both code and message match.
- `no_support()` returns the error status `"CGraph function no support"`.

### `cgraph.objects`

- `CObject` is the abstract base class with the methods `init()`, `run()` and `destroy()`.
  - `init()` and `destroy()` return an OK status by default.
  - `run()` is abstract, so subclasses must implement it.
- `DescInfo` holds three attributes: `name`, `session` and `description`.
  - `set_name()` and `set_description()` return the object, so calls can be chained.
- `CFunctionType` is an enum of the lifecycle stages: `INIT`, `RUN` and `DESTROY`.

### `cgraph.ann`

- `DomainObject` is the base class for domain-specific objects.
- `DAnnObject` is the base class for approximate-nearest-neighbour (ANN) objects. Calling its `run()` returns the no-support status.
- `AnnFuncType` lists the operations an ANN node can perform:
  - `TRAIN`, `SEARCH`, `INSERT`, `UPDATE`, `REMOVE`, `LOAD_MODEL`, `SAVE_MODEL` and `EDITION`.
  - It also has the boundary markers `PREPARE_ERROR` and `MAX_SIZE`.
- `DAnnNode` is an abstract node. You subclass it and implement `prepare_param()`, which returns the operation to perform. `run()` then does the following:
  1. It rejects any value that is not strictly between `PREPARE_ERROR` and `MAX_SIZE`, returning the error status `"error ann function type"`.
  2. It calls the matching method: `train`, `search`, `insert`, `update`, `remove`, `load_model`, `save_model` or `edition`. An operation you did not override returns the no-support status.
  3. If the operation failed, it returns that status.
  4. Otherwise it returns the result of `refresh_param()`, which is OK by default.
- `DAnnParam` is a dataclass with these fields:
  - `dim`, `cur_vec_size` and `max_vec_size`
  - `normalize`
  - `ann_model_path` and `train_file_path`

## Installation

```
pip install .
```

## Example

```python
from cgraph.ann import AnnFuncType, DAnnNode
from cgraph.status import CStatus


class SearchNode(DAnnNode):
    def prepare_param(self):
        return AnnFuncType.SEARCH

    def search(self):
        return CStatus()


status = SearchNode().run()
assert status.is_ok()
```

## What it does not do

There is no graph engine in this package. Nothing connects nodes, orders them by their dependencies, runs them on threads or shares parameters between them.

Each node or object is used on its own by calling its methods directly.

Errors are reported as `CStatus` values. The package defines no exception type of its own.

## Running the tests

```
pip install .[test]
pytest
```