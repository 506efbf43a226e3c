# sortlab

A small collection of classic sorting algorithms and console exercises for
learning how they behave.

## What is inside

- `sortlab.sorting` — bubble sort (plain and with an early-exit flag),
  insertion sort, merge sort (with its `merge` step), quick sort (with its
  `partition` step), selection sort, `insert_sorted` for keeping a list in
  order as values arrive, and `format_values` to print values as `[1] [2] [3]`.
- `sortlab.pointers` — `swap` and `split_minutes`, which turns a number of
  minutes into hours and minutes.
- `sortlab.students` — `MeasuredStudent` records sorted by height with
  `sort_by_height`, and `Registrant` records split into those aged 14 or
  under and those older with `split_by_age`.
- `sortlab.school` — a `School` registry of `Student` and `Classroom`
  records: add students and classrooms, enroll a student in a classroom and
  list who is in it. Unknown registrations or classroom ids raise
  `StudentNotFound` or `ClassroomNotFound`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from sortlab.sorting import merge_sort, insert_sorted, format_values

values = merge_sort([5, 3, 9, 1])
print(format_values(values))      # [1] [3] [5] [9]

insert_sorted(values, 4)
print(format_values(values))      # [1] [3] [4] [5] [9]
```

```python
from sortlab.school import School

school = School()
school.add_student("Ana", 101)
school.add_classroom(7)
school.enroll(101, 7)
print([student.name for student in school.students_of(7)])   # ['Ana']
```

## Commands

All commands read from standard input and write to standard output.

- `sortlab` — asks for a list of integers and prints it before and after
  sorting.
- `sortlab-pointers` — a short walkthrough of swapping two values, adding
  them up and splitting 265 minutes into hours and minutes.
- `sortlab-heights` — reads students (id, height, age), then prints their
  heights before and after sorting by height.
- `sortlab-register` — reads a count followed by a name and an age for each
  student, then prints those aged 14 or under first and the older ones after.
- `sortlab-school` — an interactive menu for creating students and classrooms,
  enrolling students and listing them; option 99 quits.