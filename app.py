#!/usr/bin/env python3

import aws_cdk as cdk

from flight_reservation_stack import FlightReservationStack

app = cdk.App()
FlightReservationStack(
    app,
    "FlightReservationStack",
)

app.synth()
