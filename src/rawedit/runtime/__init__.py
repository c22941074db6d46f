"""Runtime services: telemetry and the editor control loop."""
