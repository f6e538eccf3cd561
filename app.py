#!/usr/bin/env python3

import aws_cdk as cdk

from skynet_booking_stack import SkynetBookingStack

app = cdk.App()
SkynetBookingStack(
    app,
    "SkynetBookingStack",
)

app.synth()
