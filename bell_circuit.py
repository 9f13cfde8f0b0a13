#!/usr/bin/env python3
"""
Bell circuit demo with a uniform random sampler.

  Mode 1: print uniform random counts for the circuit's classical bits
          (placeholder result, no backend needed).
  Mode 2: run the circuit on a backend and print the real counts.

Usage:
  python3 bell_circuit.py                      # Mode 1 only
  python3 bell_circuit.py aer                  # Mode 2 on the local Aer simulator
  python3 bell_circuit.py ibm_brisbane -s 4096 # Mode 2 on IBM Quantum hardware

IBM Quantum backends read their credentials from:
  QISKIT_IBM_TOKEN     API key
  QISKIT_IBM_INSTANCE  instance CRN
  QISKIT_IBM_CHANNEL   optional, defaults to ibm_quantum_platform
"""

import argparse
import os
import sys

from qiskit import QuantumCircuit
from qiskit.transpiler import generate_preset_pass_manager
from qiskit_aer import AerSimulator
from qiskit_ibm_runtime import QiskitRuntimeService, Sampler

from uniform_sampler import generate_counts_uniform

RULE_WIDTH = 50
DEFAULT_CHANNEL = "ibm_quantum_platform"
LOCAL_BACKEND = "aer"


# ---------------------------------------------------------------------
# Circuit
# ---------------------------------------------------------------------

def build_bell() -> QuantumCircuit:
    """2-qubit Bell state (|00> + |11>)/sqrt(2), measured into 2 bits."""
    qc = QuantumCircuit(2, 2)

    # Put qubit 0 into superposition, then entangle qubit 1 with it
    qc.h(0)
    qc.cx(0, 1)

    qc.measure([0, 1], [0, 1])
    return qc


# ---------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------

def print_counts(counts: dict, title: str) -> None:
    """Print counts with their share of the total, sorted by bitstring."""
    print(f"\n{title}")
    print("=" * RULE_WIDTH)

    total = sum(counts.values())
    for bitstring, count in sorted(counts.items(), key=lambda x: x[0]):
        probability = count / total
        print(f"  |{bitstring}⟩: {count} ({probability * 100.0:.2f}%)")
    print(f"Total shots: {total}")


# ---------------------------------------------------------------------
# Backends
# ---------------------------------------------------------------------

def get_backend(name: str):
    """
    Resolve a backend by name.

    "aer" gives a local AerSimulator; anything else is looked up on
    IBM Quantum with credentials taken from the environment.
    """
    if name.lower() == LOCAL_BACKEND:
        return AerSimulator()

    service_kwargs = {"channel": os.environ.get("QISKIT_IBM_CHANNEL", DEFAULT_CHANNEL)}
    token = os.environ.get("QISKIT_IBM_TOKEN")
    instance = os.environ.get("QISKIT_IBM_INSTANCE")
    if token:
        service_kwargs["token"] = token
    if instance:
        service_kwargs["instance"] = instance

    service = QiskitRuntimeService(**service_kwargs)
    return service.backend(name)


def run_on_backend(qc: QuantumCircuit, backend, shots: int = 1000) -> dict:
    """Transpile for `backend`, run one sampler job and return its counts."""
    pm = generate_preset_pass_manager(backend=backend, optimization_level=1)
    isa_circuit = pm.run(qc)
    print(f"Circuit transpiled for {backend.name}")

    sampler = Sampler(mode=backend)
    job = sampler.run([isa_circuit], shots=shots)
    if job is None:
        raise RuntimeError("Job submission failed")

    print(f"Job {job.job_id()} submitted, waiting for results...")
    pub_result = job.result()[0]

    # Counts live under the name of the circuit's classical register
    register_name = qc.cregs[0].name
    return getattr(pub_result.data, register_name).get_counts()


# ---------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Bell circuit demo: uniform random placeholder counts, "
                    "optionally followed by a run on a real backend."
    )
    parser.add_argument(
        "backend",
        nargs="?",
        default=None,
        help=f"Backend to run on ('{LOCAL_BACKEND}' for the local simulator, "
             "or an IBM Quantum backend name such as ibm_brisbane).",
    )
    parser.add_argument(
        "-s",
        "--shots",
        type=int,
        default=1000,
        help="Number of shots for both the uniform sampler and the backend run.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the uniform sampler (e.g. 42 for repeatable output). "
             "Omit to draw from fresh entropy.",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        print("Bell Circuit Demo")
        print("=" * RULE_WIDTH)

        qc = build_bell()
        print("\nBell Circuit Created:")
        print(f"  Qubits: {qc.num_qubits}")
        print(f"  Classical bits: {qc.num_clbits}")
        print("  Gates: H(q0), CNOT(q0, q1), Measure(q0->c0), Measure(q1->c1)")
        print()
        print(qc.draw("text"))

        # Mode 1: placeholder counts, no backend needed
        print("\n\n[Mode 1] Uniform Random Sampler Execution")
        print("-" * RULE_WIDTH)

        uniform_counts = generate_counts_uniform(args.shots, qc.num_clbits, seed=args.seed)
        print_counts(uniform_counts, "Uniform Random Results")

        print("\nNote: Uniform sampler generates random bitstrings.")
        print("Expected for Bell state: ~50% |00⟩ and ~50% |11⟩")

        # Mode 2: real backend
        print("\n\n[Mode 2] Real Backend Execution")
        print("-" * RULE_WIDTH)

        if args.backend:
            print(f"Attempting to use backend: {args.backend}")
            backend = get_backend(args.backend)
            real_counts = run_on_backend(qc, backend, shots=args.shots)
            print_counts(real_counts, "Real Backend Results")
            print("\nFor Bell state, expect ~50% |00⟩ and ~50% |11⟩")
        else:
            print("Skipping real backend execution.")
            print("To use real backend, run with: python3 bell_circuit.py <backend_name>")
            print("Example: python3 bell_circuit.py ibm_brisbane")
            print(f"Local simulator: python3 bell_circuit.py {LOCAL_BACKEND}")
            print("\nMake sure to set environment variables:")
            print('  export QISKIT_IBM_TOKEN="your_token"')
            print('  export QISKIT_IBM_INSTANCE="your_instance"')

        print("\n" + "=" * RULE_WIDTH)
        print("Demo completed successfully!")
        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
