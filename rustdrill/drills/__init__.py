"""Worked solutions to the exercises: basics, structs, collections, errors, iterators and traits."""