"""
Application services layer (use cases).

Services orchestrate the domain logic: destination path synthesis,
file transfer according to the requested action, and the per-file
pipeline (parse -> lookup -> resolve -> transfer).

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""
