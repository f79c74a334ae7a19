# salonbook - salon customer loyalty & reporting core
