"""Work-time tracker package.

Organized by feature modules (worktime, auth, users, payroll) with a thin
Flask controller layer over service/repository layers. All state lives in an
explicitly constructed local store built by ``container.build_container``.
"""
